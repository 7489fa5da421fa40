from task_manager_api.core.exceptions.domain_error import DomainError


class TaskNotFoundError(DomainError):
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} does not exist")
