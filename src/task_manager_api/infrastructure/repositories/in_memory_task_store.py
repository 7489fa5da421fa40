from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from task_manager_api.core.application.ports.task_store_port import TaskStorePort
from task_manager_api.core.domain.task.entities.task import Task
from task_manager_api.core.domain.task.value_objects.new_task import NewTask
from task_manager_api.core.domain.task.value_objects.task_patch import TaskPatch
from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.core.domain.task.value_objects.task_statistics import TaskStatistics
from task_manager_api.core.domain.task.value_objects.task_status import TaskStatus
from task_manager_api.core.exceptions.task_not_found_error import TaskNotFoundError
from task_manager_api.infrastructure.repositories.read_write_lock import ReadWriteLock

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_task_id() -> str:
    return str(uuid.uuid4())


class InMemoryTaskStore(TaskStorePort):
    """
    Dict-backed task collection guarded by a reader/writer lock.

    ``list()`` happens to return insertion order (dict order); callers must
    not depend on it. Stored tasks are frozen, so handing them out is safe.
    Nothing is logged while the lock is held.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_task_id,
    ):
        self._clock = clock
        self._id_factory = id_factory
        self._tasks: dict[str, Task] = {}
        self._retired_ids: set[str] = set()
        self._lock = ReadWriteLock()

    def create(self, new_task: NewTask) -> Task:
        with self._lock.write_locked():
            task_id = self._issue_id()
            now = self._clock()
            task = Task(
                id=task_id,
                title=new_task.title,
                description=new_task.description,
                priority=new_task.priority,
                status=new_task.status,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task_id] = task
            return task

    def get(self, task_id: str) -> Task:
        with self._lock.read_locked():
            task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def list(self) -> list[Task]:
        with self._lock.read_locked():
            return list(self._tasks.values())

    def update(self, task_id: str, patch: TaskPatch) -> Task:
        with self._lock.write_locked():
            current = self._tasks.get(task_id)
            if current is None:
                raise TaskNotFoundError(task_id)
            updated = current.apply_patch(patch, updated_at=self._next_timestamp(current.updated_at))
            self._tasks[task_id] = updated
            return updated

    def delete(self, task_id: str) -> None:
        with self._lock.write_locked():
            if self._tasks.pop(task_id, None) is None:
                raise TaskNotFoundError(task_id)
            self._retired_ids.add(task_id)

    def stats(self) -> TaskStatistics:
        with self._lock.read_locked():
            tasks = list(self._tasks.values())

        # Full rescan on every call; no incremental counters.
        by_status = {status: 0 for status in TaskStatus}
        by_priority = {priority: 0 for priority in TaskPriority}
        for task in tasks:
            by_status[task.status] += 1
            by_priority[task.priority] += 1
        return TaskStatistics(total=len(tasks), by_status=by_status, by_priority=by_priority)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)

    def _issue_id(self) -> str:
        # Caller holds the write lock.
        task_id = self._id_factory()
        while task_id in self._tasks or task_id in self._retired_ids:
            task_id = self._id_factory()
        return task_id

    def _next_timestamp(self, previous: datetime) -> datetime:
        now = self._clock()
        if now <= previous:
            return previous + _TICK
        return now
