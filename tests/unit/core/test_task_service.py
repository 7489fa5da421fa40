from unittest.mock import MagicMock

import pytest
from prometheus_client import REGISTRY

from task_manager_api.core.application.ports.task_store_port import TaskStorePort
from task_manager_api.core.application.services.task_service import TaskService
from task_manager_api.core.domain.task import TaskStatus
from task_manager_api.core.exceptions import TaskNotFoundError, TaskValidationError
from task_manager_api.infrastructure.repositories.in_memory_task_store import InMemoryTaskStore


def _operation_count(operation: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "task_api_operations_total", {"operation": operation, "outcome": outcome}
    )
    return value or 0.0


@pytest.fixture
def service():
    return TaskService(InMemoryTaskStore())


def test_create_validates_before_touching_store(valid_payload):
    store = MagicMock(spec=TaskStorePort)
    service = TaskService(store)

    with pytest.raises(TaskValidationError):
        service.create_task({**valid_payload, "priority": "urgent"})

    store.create.assert_not_called()


def test_update_validates_before_looking_up_task():
    store = MagicMock(spec=TaskStorePort)
    service = TaskService(store)

    with pytest.raises(TaskValidationError):
        service.update_task("unknown", {"status": "archived"})

    store.update.assert_not_called()


def test_update_passes_presence_aware_patch_to_store():
    store = MagicMock(spec=TaskStorePort)
    service = TaskService(store)

    service.update_task("task-1", {"status": "completed"})

    task_id, patch = store.update.call_args.args
    assert task_id == "task-1"
    assert patch.present_fields == ["status"]
    assert patch.status.value is TaskStatus.COMPLETED


def test_full_lifecycle(service, valid_payload):
    created = service.create_task(valid_payload)
    assert created.status is TaskStatus.PENDING

    updated = service.update_task(created.id, {"status": "completed"})
    assert updated.status is TaskStatus.COMPLETED
    assert updated.priority == created.priority

    service.delete_task(created.id)
    with pytest.raises(TaskNotFoundError):
        service.get_task(created.id)


def test_statistics_reflect_current_tasks(service, valid_payload):
    service.create_task(valid_payload)
    service.create_task({**valid_payload, "priority": "low", "status": "completed"})

    stats = service.get_statistics()

    assert stats.total == len(service.list_tasks()) == 2
    assert sum(stats.by_status.values()) == stats.total


def test_records_operation_outcomes(service, valid_payload):
    before_success = _operation_count("create", "success")
    before_invalid = _operation_count("create", "invalid")
    before_missing = _operation_count("get", "not_found")

    service.create_task(valid_payload)
    with pytest.raises(TaskValidationError):
        service.create_task({})
    with pytest.raises(TaskNotFoundError):
        service.get_task("missing")

    assert _operation_count("create", "success") == before_success + 1
    assert _operation_count("create", "invalid") == before_invalid + 1
    assert _operation_count("get", "not_found") == before_missing + 1


def test_unexpected_store_failure_propagates():
    store = MagicMock(spec=TaskStorePort)
    store.list.side_effect = RuntimeError("disk on fire")
    service = TaskService(store)

    with pytest.raises(RuntimeError):
        service.list_tasks()


def _tasks_stored() -> float:
    return REGISTRY.get_sample_value("task_api_tasks_stored")


def test_stored_gauge_reflects_prepopulated_store(new_task):
    store = InMemoryTaskStore()
    for _ in range(3):
        store.create(new_task)

    service = TaskService(store)
    assert _tasks_stored() == 3

    service.delete_task(store.list()[0].id)
    assert _tasks_stored() == 2


def test_stored_gauge_follows_the_latest_store(new_task, valid_payload):
    TaskService(InMemoryTaskStore()).seed(new_task)
    second = TaskService(InMemoryTaskStore())
    second.seed(new_task)

    assert _tasks_stored() == 1

    second.create_task(valid_payload)
    assert _tasks_stored() == 2
