from __future__ import annotations

from abc import ABC, abstractmethod

from task_manager_api.core.domain.task.entities.task import Task
from task_manager_api.core.domain.task.value_objects.new_task import NewTask
from task_manager_api.core.domain.task.value_objects.task_patch import TaskPatch
from task_manager_api.core.domain.task.value_objects.task_statistics import TaskStatistics


class TaskStorePort(ABC):
    """Port for the task collection.

    Implementations MUST raise ``TaskNotFoundError`` (from ``core.exceptions``)
    from ``get``, ``update`` and ``delete`` when the id is unknown. That is the
    only failure a store reports.
    """

    @abstractmethod
    def create(self, new_task: NewTask) -> Task:
        """Stores a task under a freshly generated id and returns it."""

    @abstractmethod
    def get(self, task_id: str) -> Task:
        """Returns the task stored under ``task_id``."""

    @abstractmethod
    def list(self) -> list[Task]:
        """Returns a consistent snapshot of every task. Order is unspecified."""

    @abstractmethod
    def update(self, task_id: str, patch: TaskPatch) -> Task:
        """Applies the present fields of ``patch`` and bumps ``updated_at``."""

    @abstractmethod
    def delete(self, task_id: str) -> None:
        """Removes the task. Its id is never issued again."""

    @abstractmethod
    def stats(self) -> TaskStatistics:
        """Counts per status and per priority over the whole collection."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of tasks currently held."""
