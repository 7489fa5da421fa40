from datetime import datetime

from pydantic import BaseModel, Field


class TaskResponseDTO(BaseModel):
    id: str
    title: str
    description: str
    priority: str = Field(description="low | medium | high")
    status: str = Field(description="pending | in-progress | completed")
    created_at: datetime
    updated_at: datetime


class TaskListResponseDTO(BaseModel):
    tasks: list[TaskResponseDTO]
    count: int


class StatisticsDTO(BaseModel):
    total: int
    by_status: dict[str, int]
    by_priority: dict[str, int]


class StatsResponseDTO(BaseModel):
    statistics: StatisticsDTO
    timestamp: datetime
