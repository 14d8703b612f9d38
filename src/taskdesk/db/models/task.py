from sqlalchemy import Boolean, Column, String, false
from taskdesk.core.config import settings
from taskdesk.db.base import Base


class Task(Base):
    """Задача: заголовок и флаг выполнения"""
    __tablename__ = "tasks"
    # Идентификаторы удаленных задач не переиспользуются
    __table_args__ = {"sqlite_autoincrement": True}

    title = Column(String(settings.TITLE_MAX_LENGTH), nullable=False)
    done = Column(Boolean, default=False, server_default=false(), nullable=False)

    def __repr__(self) -> str:
        return f"<Task id={self.id} title={self.title!r} done={self.done}>"
