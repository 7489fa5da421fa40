from task_manager_api.infrastructure.config.main_settings import Settings

__all__ = ["Settings"]
