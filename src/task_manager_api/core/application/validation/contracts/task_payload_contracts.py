from pydantic import BaseModel, ConfigDict, Field

from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.core.domain.task.value_objects.task_status import TaskStatus

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class CreateTaskContract(BaseModel):
    """Field constraints for a new task."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    priority: TaskPriority
    status: TaskStatus = TaskStatus.PENDING


class UpdateTaskContract(BaseModel):
    """
    Same per-field constraints, every field optional.
    Presence is read from ``model_fields_set``, never from the ``None`` default.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    priority: TaskPriority | None = None
    status: TaskStatus | None = None
