from dataclasses import dataclass

from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.core.domain.task.value_objects.task_status import TaskStatus


@dataclass(frozen=True)
class NewTask:
    """Normalized create payload. Status is already defaulted."""

    title: str
    description: str
    priority: TaskPriority
    status: TaskStatus = TaskStatus.PENDING
