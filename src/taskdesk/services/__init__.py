from .task import TaskService

__all__ = ["TaskService"]
