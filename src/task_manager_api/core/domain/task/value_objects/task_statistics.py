from dataclasses import dataclass, field

from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.core.domain.task.value_objects.task_status import TaskStatus


@dataclass(frozen=True)
class TaskStatistics:
    total: int
    by_status: dict[TaskStatus, int] = field(default_factory=dict)
    by_priority: dict[TaskPriority, int] = field(default_factory=dict)
