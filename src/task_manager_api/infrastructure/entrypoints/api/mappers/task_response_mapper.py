from datetime import datetime

from task_manager_api.core.domain.task.entities.task import Task
from task_manager_api.core.domain.task.value_objects.task_statistics import TaskStatistics
from task_manager_api.infrastructure.entrypoints.api.dtos.task_dtos import (
    StatisticsDTO,
    StatsResponseDTO,
    TaskListResponseDTO,
    TaskResponseDTO,
)


class TaskResponseMapper:
    """Maps domain tasks and statistics to their JSON response shapes."""

    @staticmethod
    def to_dto(task: Task) -> TaskResponseDTO:
        return TaskResponseDTO(
            id=task.id,
            title=task.title,
            description=task.description,
            priority=task.priority.value,
            status=task.status.value,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    @classmethod
    def to_list_dto(cls, tasks: list[Task]) -> TaskListResponseDTO:
        items = [cls.to_dto(task) for task in tasks]
        return TaskListResponseDTO(tasks=items, count=len(items))

    @staticmethod
    def to_stats_dto(statistics: TaskStatistics, timestamp: datetime) -> StatsResponseDTO:
        return StatsResponseDTO(
            statistics=StatisticsDTO(
                total=statistics.total,
                by_status={status.value: count for status, count in statistics.by_status.items()},
                by_priority={
                    priority.value: count for priority, count in statistics.by_priority.items()
                },
            ),
            timestamp=timestamp,
        )
