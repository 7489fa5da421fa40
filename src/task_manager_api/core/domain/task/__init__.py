from task_manager_api.core.domain.task.entities.task import Task
from task_manager_api.core.domain.task.value_objects.field_update import FieldUpdate
from task_manager_api.core.domain.task.value_objects.new_task import NewTask
from task_manager_api.core.domain.task.value_objects.task_patch import TaskPatch
from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.core.domain.task.value_objects.task_statistics import TaskStatistics
from task_manager_api.core.domain.task.value_objects.task_status import TaskStatus

__all__ = [
    "FieldUpdate",
    "NewTask",
    "Task",
    "TaskPatch",
    "TaskPriority",
    "TaskStatistics",
    "TaskStatus",
]
