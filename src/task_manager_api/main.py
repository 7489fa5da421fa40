import uvicorn

from task_manager_api.infrastructure.config.main_settings import Settings
from task_manager_api.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Run the development server with auto-reload."""
    settings = Settings()
    uvicorn.run(
        "task_manager_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_config=None,
        access_log=False,
        log_level=settings.log_level.lower(),
    )


def serve():
    """Run the server without reload."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
        log_level=settings.log_level.lower(),
    )


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
