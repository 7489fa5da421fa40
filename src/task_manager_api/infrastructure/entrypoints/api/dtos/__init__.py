from .error_response_dto import ErrorResponseDTO, FieldViolationDTO
from .service_info_dtos import HealthResponseDTO, WelcomeResponseDTO
from .task_dtos import StatisticsDTO, StatsResponseDTO, TaskListResponseDTO, TaskResponseDTO

__all__ = [
    "ErrorResponseDTO",
    "FieldViolationDTO",
    "HealthResponseDTO",
    "StatisticsDTO",
    "StatsResponseDTO",
    "TaskListResponseDTO",
    "TaskResponseDTO",
    "WelcomeResponseDTO",
]
