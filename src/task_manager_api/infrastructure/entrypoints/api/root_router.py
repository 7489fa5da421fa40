from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from task_manager_api.infrastructure.config.main_settings import Settings
from task_manager_api.infrastructure.entrypoints.api.dependencies import get_settings
from task_manager_api.infrastructure.entrypoints.api.dtos.service_info_dtos import (
    HealthResponseDTO,
    WelcomeResponseDTO,
)

router = APIRouter(tags=["service"])


@router.get("/", response_model=WelcomeResponseDTO)
def welcome(settings: Settings = Depends(get_settings)):
    return WelcomeResponseDTO(
        message=f"Welcome to {settings.app_name}",
        version=settings.app_version,
        docs="Visit /health for health check",
    )


@router.get("/health", response_model=HealthResponseDTO)
def health_check(settings: Settings = Depends(get_settings)):
    return HealthResponseDTO(
        status="healthy",
        timestamp=datetime.now(UTC),
        version=settings.app_version,
    )
