from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from task_manager_api.core.application.services.task_service import TaskService
from task_manager_api.infrastructure.entrypoints.api.dependencies import get_task_service
from task_manager_api.infrastructure.entrypoints.api.dtos.error_response_dto import (
    ErrorResponseDTO,
)
from task_manager_api.infrastructure.entrypoints.api.dtos.task_dtos import (
    TaskListResponseDTO,
    TaskResponseDTO,
)
from task_manager_api.infrastructure.entrypoints.api.mappers.task_response_mapper import (
    TaskResponseMapper,
)

router = APIRouter(tags=["tasks"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponseDTO}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponseDTO}}


@router.get("", response_model=TaskListResponseDTO)
def list_tasks(service: TaskService = Depends(get_task_service)):
    return TaskResponseMapper.to_list_dto(service.list_tasks())


# Bodies are taken as plain JSON; TaskRequestValidator owns every field check.
@router.post(
    "",
    response_model=TaskResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
def create_task(
    payload: Any = Body(..., examples=[{"title": "Learn X", "description": "desc", "priority": "high"}]),
    service: TaskService = Depends(get_task_service),
):
    return TaskResponseMapper.to_dto(service.create_task(payload))


@router.get("/{task_id}", response_model=TaskResponseDTO, responses=_NOT_FOUND)
def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return TaskResponseMapper.to_dto(service.get_task(task_id))


@router.put(
    "/{task_id}",
    response_model=TaskResponseDTO,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def update_task(
    task_id: str,
    payload: Any = Body(..., examples=[{"status": "completed"}]),
    service: TaskService = Depends(get_task_service),
):
    return TaskResponseMapper.to_dto(service.update_task(task_id, payload))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)) -> Response:
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
