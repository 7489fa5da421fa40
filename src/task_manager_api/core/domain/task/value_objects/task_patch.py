from dataclasses import dataclass, field

from task_manager_api.core.domain.task.value_objects.field_update import FieldUpdate
from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.core.domain.task.value_objects.task_status import TaskStatus


@dataclass(frozen=True)
class TaskPatch:
    title: FieldUpdate[str] = field(default_factory=FieldUpdate.absent)
    description: FieldUpdate[str] = field(default_factory=FieldUpdate.absent)
    priority: FieldUpdate[TaskPriority] = field(default_factory=FieldUpdate.absent)
    status: FieldUpdate[TaskStatus] = field(default_factory=FieldUpdate.absent)

    @property
    def present_fields(self) -> list[str]:
        return [
            name
            for name in ("title", "description", "priority", "status")
            if getattr(self, name).is_present
        ]

    @property
    def is_empty(self) -> bool:
        return not self.present_fields
