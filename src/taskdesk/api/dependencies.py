import json
from typing import Any, Dict, Optional
from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession
from taskdesk.core.config import settings
from taskdesk.core.exceptions import TaskNotFound
from taskdesk.core.pagination import resolve_page
from taskdesk.db.database import get_async_session
from taskdesk.services.task import TaskService

# Верхняя граница 64-битного INTEGER
MAX_TASK_ID = 2 ** 63 - 1


async def get_task_service(
    session: AsyncSession = Depends(get_async_session)
) -> TaskService:
    return TaskService(session)


def resolve_task_id(task_id: str) -> int:
    """
    ID задачи из пути.

    Нечисловой ID или ID вне диапазона INTEGER не может принадлежать
    ни одной задаче, поэтому отвечаем 404, а не ошибкой валидации.
    """
    if not (task_id.isascii() and task_id.isdigit()):
        raise TaskNotFound(task_id)

    value = int(task_id)
    if value < 1 or value > MAX_TASK_ID:
        raise TaskNotFound(task_id)
    return value


async def get_payload(request: Request) -> Dict[str, Any]:
    """
    Тело запроса в виде словаря.

    Пустое, битое или не-объектное тело считается пустым вводом;
    дальше его разбирает validate().
    """
    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


class PaginationParams:
    """Параметры пагинации"""

    def __init__(
        self,
        request: Request,
        page: Optional[str] = Query(None, description="Номер страницы, с 1")
    ):
        self.page = resolve_page(page)
        self.per_page = settings.TASKS_PAGE_SIZE
        self.path = str(request.url.replace(query=""))
