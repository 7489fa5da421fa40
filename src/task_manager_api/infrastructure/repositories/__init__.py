from task_manager_api.infrastructure.repositories.in_memory_task_store import InMemoryTaskStore
from task_manager_api.infrastructure.repositories.read_write_lock import ReadWriteLock

__all__ = ["InMemoryTaskStore", "ReadWriteLock"]
