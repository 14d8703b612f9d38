from typing import Any, Dict, List, Optional
from fastapi import HTTPException


class TaskDeskException(HTTPException):
    """Базовое исключение TaskDesk"""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(status_code=status_code, detail=message)

    def to_dict(self) -> Dict[str, Any]:
        """Тело JSON-ответа"""
        content: Dict[str, Any] = {
            "message": self.message,
            "error": self.error_code
        }
        if self.details:
            content["details"] = self.details
        return content


# Validation Errors
class ValidationError(TaskDeskException):
    """
    Ошибка валидации входных данных.

    Хранит карту поле -> список сообщений. Основное сообщение берется
    из первой ошибки, остальные учитываются счетчиком.
    """

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        self.errors = errors
        super().__init__(
            status_code=422,
            error_code="VALIDATION_ERROR",
            message=message or self.summarize(errors)
        )

    @staticmethod
    def summarize(errors: Dict[str, List[str]]) -> str:
        messages = [msg for msgs in errors.values() for msg in msgs]
        if not messages:
            return "The given data was invalid."

        summary = messages[0]
        remaining = len(messages) - 1
        if remaining:
            noun = "error" if remaining == 1 else "errors"
            summary += f" (and {remaining} more {noun})"
        return summary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "errors": self.errors
        }


# Business Logic Errors
class RecordNotFoundError(TaskDeskException):
    """Запись не найдена"""

    def __init__(self, entity_type: str = "Record", entity_id: Any = None):
        message = f"{entity_type} not found."
        if entity_id is not None:
            message = f"{entity_type} {entity_id} not found."

        super().__init__(
            status_code=404,
            error_code="RECORD_NOT_FOUND",
            message=message
        )


class TaskNotFound(RecordNotFoundError):
    """Задача не найдена"""

    def __init__(self, task_id: Any = None):
        super().__init__("Task", task_id)
        self.error_code = "TASK_NOT_FOUND"
