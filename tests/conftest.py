from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from task_manager_api.core.domain.task.value_objects.new_task import NewTask
from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.infrastructure.config.main_settings import Settings
from task_manager_api.infrastructure.entrypoints.api.app_factory import create_app
from task_manager_api.infrastructure.repositories.in_memory_task_store import InMemoryTaskStore


class FakeClock:
    """Manually driven clock. Does not move unless told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        app_name="TestTaskAPI",
        app_version="9.9.9",
        env="test",
        seed_sample_task=False,
        metrics_enabled=True,
        tracing_enabled=False,
    )


@pytest.fixture
def store():
    return InMemoryTaskStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_task():
    return NewTask(title="Learn X", description="desc", priority=TaskPriority.HIGH)


@pytest.fixture
def valid_payload():
    return {"title": "Learn X", "description": "desc", "priority": "high"}
