from task_manager_api.core.exceptions.domain_error import DomainError


class MalformedInputError(DomainError):
    """Raised when a request body cannot be read as the expected structure."""

    def __init__(self, message: str = "Request body must be a JSON object"):
        self.message = message
        super().__init__(message)
