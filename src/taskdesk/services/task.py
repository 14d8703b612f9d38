from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy import select, func, desc
from sqlalchemy.ext.asyncio import AsyncSession
from taskdesk.db.models.task import Task
from taskdesk.core.exceptions import TaskNotFound
from taskdesk.utils.logger import service_logger as logger

# Поля, которые разрешено менять через обновление
UPDATABLE_FIELDS = ("title", "done")


class TaskService:
    """Сервис для работы с задачами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_tasks(self, page: int = 1, per_page: int = 10) -> Tuple[List[Task], int]:
        """Страница задач, новые первыми, и общее количество"""
        total = await self.session.scalar(select(func.count(Task.id))) or 0

        # Страница за концом списка пуста, в БД не ходим
        offset = (max(page, 1) - 1) * per_page
        if offset >= total:
            return [], total

        query = (
            select(Task)
            .order_by(desc(Task.id))
            .offset(offset)
            .limit(per_page)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def create_task(self, title: str, done: bool = False) -> Task:
        """Создание новой задачи"""
        task = Task(title=title, done=done)

        self.session.add(task)
        await self.session.commit()
        await self.session.refresh(task)

        logger.info(f"Task {task.id} created")
        return task

    async def get_task_by_id(self, task_id: int) -> Optional[Task]:
        """Получение задачи по ID"""
        return await self.session.get(Task, task_id)

    async def get_task(self, task_id: int) -> Task:
        """Получение задачи по ID или TaskNotFound"""
        task = await self.get_task_by_id(task_id)
        if not task:
            raise TaskNotFound(task_id)
        return task

    async def update_task(self, task_id: int, update_data: Dict[str, Any]) -> Task:
        """
        Частичное обновление задачи.

        Применяются только переданные поля, остальные не меняются.
        Пустой update_data возвращает задачу без изменений.
        """
        task = await self.get_task(task_id)

        changes = {
            field: value for field, value in update_data.items()
            if field in UPDATABLE_FIELDS and getattr(task, field) != value
        }
        if not changes:
            return task

        for field, value in changes.items():
            setattr(task, field, value)

        await self.session.commit()
        await self.session.refresh(task)

        logger.info(f"Task {task.id} updated: {', '.join(changes)}")
        return task

    async def delete_task(self, task_id: int) -> None:
        """Удаление задачи (без возможности восстановления)"""
        task = await self.get_task(task_id)

        await self.session.delete(task)
        await self.session.commit()

        logger.info(f"Task {task_id} deleted")
