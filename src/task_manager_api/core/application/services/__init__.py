from task_manager_api.core.application.services.task_service import TaskService

__all__ = ["TaskService"]
