from dataclasses import dataclass, replace
from datetime import datetime

from task_manager_api.core.domain.task.value_objects.task_patch import TaskPatch
from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.core.domain.task.value_objects.task_status import TaskStatus


@dataclass(frozen=True)
class Task:
    id: str
    title: str
    description: str
    priority: TaskPriority
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def apply_patch(self, patch: TaskPatch, updated_at: datetime) -> "Task":
        """
        Returns a new Task with the present fields of ``patch`` applied.
        ``id`` and ``created_at`` are never touched.
        """
        if updated_at < self.created_at:
            raise ValueError("updated_at cannot precede created_at")
        return replace(
            self,
            title=patch.title.apply(self.title),
            description=patch.description.apply(self.description),
            priority=patch.priority.apply(self.priority),
            status=patch.status.apply(self.status),
            updated_at=updated_at,
        )
