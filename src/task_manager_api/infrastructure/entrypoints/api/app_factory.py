from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_manager_api.core.application.ports.task_store_port import TaskStorePort
from task_manager_api.core.application.services.task_service import TaskService
from task_manager_api.core.domain.task.value_objects.new_task import NewTask
from task_manager_api.core.domain.task.value_objects.task_priority import TaskPriority
from task_manager_api.core.domain.task.value_objects.task_status import TaskStatus
from task_manager_api.infrastructure.config.main_settings import Settings
from task_manager_api.infrastructure.entrypoints.api.exception_handlers import (
    register_exception_handlers,
)
from task_manager_api.infrastructure.entrypoints.api.metrics_router import (
    router as metrics_router,
)
from task_manager_api.infrastructure.entrypoints.api.root_router import router as root_router
from task_manager_api.infrastructure.entrypoints.api.stats_router import router as stats_router
from task_manager_api.infrastructure.entrypoints.api.task_router import router as task_router
from task_manager_api.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from task_manager_api.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from task_manager_api.infrastructure.observability.tracing_setup import configure_tracing
from task_manager_api.infrastructure.repositories.in_memory_task_store import InMemoryTaskStore

logger = get_logger(__name__)

SAMPLE_TASK = NewTask(
    title="Sample Task",
    description="This is a sample task",
    priority=TaskPriority.HIGH,
    status=TaskStatus.PENDING,
)


def create_app(settings: Settings, store: TaskStorePort | None = None) -> FastAPI:
    """
    Build a fully wired application. Every call gets its own TaskService and,
    unless one is passed in, its own empty InMemoryTaskStore.
    """
    configure_logging(settings)
    configure_tracing(settings)

    task_service = TaskService(store if store is not None else InMemoryTaskStore())
    if settings.seed_sample_task:
        task_service.seed(SAMPLE_TASK)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.settings = settings
    app.state.task_service = task_service

    register_exception_handlers(app)

    # Last added runs first: correlation wraps CORS so preflights are logged too.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(CorrelationMiddleware)

    app.include_router(root_router)
    app.include_router(task_router, prefix="/api/tasks")
    app.include_router(stats_router, prefix="/api")
    if settings.metrics_enabled:
        app.include_router(metrics_router)

    _log_boot_diagnostics(settings)
    return app


def _log_boot_diagnostics(settings: Settings) -> None:
    logger.info(
        "Application configured",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.env,
        seed_sample_task=settings.seed_sample_task,
        metrics_enabled=settings.metrics_enabled,
        tracing_enabled=settings.tracing_enabled,
        endpoints=["/api/tasks", "/api/stats", "/health"],
    )
