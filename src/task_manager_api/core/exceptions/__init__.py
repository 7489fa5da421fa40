from task_manager_api.core.exceptions.domain_error import DomainError
from task_manager_api.core.exceptions.field_violation import FieldViolation
from task_manager_api.core.exceptions.malformed_input_error import MalformedInputError
from task_manager_api.core.exceptions.task_not_found_error import TaskNotFoundError
from task_manager_api.core.exceptions.task_validation_error import TaskValidationError

__all__ = [
    "DomainError",
    "FieldViolation",
    "MalformedInputError",
    "TaskNotFoundError",
    "TaskValidationError",
]
