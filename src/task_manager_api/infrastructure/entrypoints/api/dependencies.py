from fastapi import Request

from task_manager_api.core.application.services.task_service import TaskService
from task_manager_api.infrastructure.config.main_settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_task_service(request: Request) -> TaskService:
    """Each application owns its service and store; nothing is process-global."""
    return request.app.state.task_service
