from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict
from taskdesk.core.config import settings
from taskdesk.core.pagination import Page


# Правила валидации входных данных
TASK_CREATE_RULES: Dict[str, str] = {
    "title": f"required|string|max:{settings.TITLE_MAX_LENGTH}",
}

TASK_UPDATE_RULES: Dict[str, str] = {
    "title": f"sometimes|string|max:{settings.TITLE_MAX_LENGTH}",
    "done": "sometimes|boolean",
}


class TaskResponse(BaseModel):
    """Схема задачи для чтения"""
    id: int
    title: str
    done: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


TaskPage = Page[TaskResponse]


class ValidationErrorResponse(BaseModel):
    message: str
    errors: Dict[str, List[str]]


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    time: str
