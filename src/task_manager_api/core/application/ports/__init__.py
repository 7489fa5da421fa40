from task_manager_api.core.application.ports.task_store_port import TaskStorePort

__all__ = ["TaskStorePort"]
