from .task_response_mapper import TaskResponseMapper

__all__ = ["TaskResponseMapper"]
