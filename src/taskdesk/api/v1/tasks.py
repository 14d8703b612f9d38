# taskdesk/api/v1/tasks.py

from typing import Any, Dict
from fastapi import APIRouter, Depends, Response, status

from ...core.exceptions import ValidationError
from ...core.pagination import paginate
from ...core.validation import validate
from ...db.schemas import (
    TASK_CREATE_RULES, TASK_UPDATE_RULES, TaskResponse, TaskPage,
    ValidationErrorResponse, ErrorResponse
)
from ...services import TaskService
from ..dependencies import (
    get_task_service, get_payload, resolve_task_id, PaginationParams
)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}
INVALID = {422: {"model": ValidationErrorResponse}}


def validated(payload: Dict[str, Any], rules: Dict[str, str]) -> Dict[str, Any]:
    data, errors = validate(payload, rules)
    if errors:
        raise ValidationError(errors)
    return data


@router.get("", response_model=TaskPage)
async def list_tasks(
    pagination: PaginationParams = Depends(),
    service: TaskService = Depends(get_task_service)
):
    """Получить список задач, новые первыми"""
    tasks, total = await service.list_tasks(
        page=pagination.page,
        per_page=pagination.per_page
    )

    return paginate(
        [TaskResponse.model_validate(task) for task in tasks],
        pagination.page,
        pagination.per_page,
        total=total,
        path=pagination.path
    )


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses=INVALID
)
async def create_task(
    payload: Dict[str, Any] = Depends(get_payload),
    service: TaskService = Depends(get_task_service)
):
    """Создать новую задачу"""
    data = validated(payload, TASK_CREATE_RULES)
    return await service.create_task(title=data["title"])


@router.get("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
async def get_task(
    task_id: int = Depends(resolve_task_id),
    service: TaskService = Depends(get_task_service)
):
    """Получить задачу"""
    return await service.get_task(task_id)


@router.api_route(
    "/{task_id}",
    methods=["PATCH", "PUT"],
    response_model=TaskResponse,
    responses={**NOT_FOUND, **INVALID}
)
async def update_task(
    task_id: int = Depends(resolve_task_id),
    payload: Dict[str, Any] = Depends(get_payload),
    service: TaskService = Depends(get_task_service)
):
    """
    Обновить задачу.

    Отсутствующие в теле поля не меняются. Сначала ищем задачу,
    затем проверяем ввод: для несуществующей задачи всегда 404.
    """
    await service.get_task(task_id)
    data = validated(payload, TASK_UPDATE_RULES)
    return await service.update_task(task_id, data)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND
)
async def delete_task(
    task_id: int = Depends(resolve_task_id),
    service: TaskService = Depends(get_task_service)
):
    """Удалить задачу"""
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
