from task_manager_api.core.application.validation.task_request_validator import (
    TaskRequestValidator,
)

__all__ = ["TaskRequestValidator"]
