from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from task_manager_api.core.application.ports.task_store_port import TaskStorePort
from task_manager_api.core.application.validation.task_request_validator import (
    TaskRequestValidator,
)
from task_manager_api.core.domain.task.entities.task import Task
from task_manager_api.core.domain.task.value_objects.new_task import NewTask
from task_manager_api.core.domain.task.value_objects.task_statistics import TaskStatistics
from task_manager_api.core.exceptions.domain_error import DomainError
from task_manager_api.core.exceptions.task_not_found_error import TaskNotFoundError
from task_manager_api.infrastructure.observability.logger_factory_service import get_logger
from task_manager_api.infrastructure.observability.metrics_service import (
    TASKS_STORED,
    record_operation,
)
from task_manager_api.infrastructure.observability.tracing_setup import trace_operation

logger = get_logger(__name__)


class TaskService:
    """
    Entry point for every task operation.
    Runs the validator, then the store. Domain errors propagate to the caller.
    """

    def __init__(self, store: TaskStorePort, validator: TaskRequestValidator | None = None):
        self.store = store
        self.validator = validator or TaskRequestValidator()
        self._refresh_stored_gauge()

    @trace_operation("task.create")
    def create_task(self, payload: Any) -> Task:
        with _track("create"):
            new_task = self.validator.validate_create(payload)
            task = self.store.create(new_task)
        self._refresh_stored_gauge()
        logger.info("Task created", task_id=task.id, priority=task.priority, status=task.status)
        return task

    def seed(self, new_task: NewTask) -> Task:
        """Store an already-normalized task, bypassing payload validation."""
        task = self.store.create(new_task)
        self._refresh_stored_gauge()
        logger.info("Sample task seeded", task_id=task.id)
        return task

    @trace_operation("task.list")
    def list_tasks(self) -> list[Task]:
        with _track("list"):
            return self.store.list()

    @trace_operation("task.get")
    def get_task(self, task_id: str) -> Task:
        with _track("get"):
            return self.store.get(task_id)

    @trace_operation("task.update")
    def update_task(self, task_id: str, payload: Any) -> Task:
        with _track("update"):
            patch = self.validator.validate_update(payload)
            task = self.store.update(task_id, patch)
        logger.info("Task updated", task_id=task_id, fields=patch.present_fields)
        return task

    @trace_operation("task.delete")
    def delete_task(self, task_id: str) -> None:
        with _track("delete"):
            self.store.delete(task_id)
        self._refresh_stored_gauge()
        logger.info("Task deleted", task_id=task_id)

    @trace_operation("task.stats")
    def get_statistics(self) -> TaskStatistics:
        with _track("stats"):
            return self.store.stats()

    def _refresh_stored_gauge(self) -> None:
        # Set from the store size, never tallied.
        TASKS_STORED.set(len(self.store))


@contextmanager
def _track(operation: str) -> Iterator[None]:
    """Record the outcome metric; log expected rejections."""
    try:
        yield
    except TaskNotFoundError as exc:
        record_operation(operation, "not_found")
        logger.warning("Task not found", operation=operation, task_id=exc.task_id)
        raise
    except DomainError as exc:
        record_operation(operation, "invalid")
        logger.warning(
            "Task payload rejected",
            operation=operation,
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
        raise
    except Exception:
        record_operation(operation, "error")
        raise
    else:
        record_operation(operation, "success")
