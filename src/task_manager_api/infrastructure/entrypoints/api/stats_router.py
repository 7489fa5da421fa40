from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from task_manager_api.core.application.services.task_service import TaskService
from task_manager_api.infrastructure.entrypoints.api.dependencies import get_task_service
from task_manager_api.infrastructure.entrypoints.api.dtos.task_dtos import StatsResponseDTO
from task_manager_api.infrastructure.entrypoints.api.mappers.task_response_mapper import (
    TaskResponseMapper,
)

router = APIRouter(tags=["statistics"])


@router.get("/stats", response_model=StatsResponseDTO)
def get_task_stats(service: TaskService = Depends(get_task_service)):
    return TaskResponseMapper.to_stats_dto(service.get_statistics(), datetime.now(UTC))
