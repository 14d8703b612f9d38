# Импорт всех моделей для корректной работы create_all
from .task import Task

__all__ = [
    "Task",
]
