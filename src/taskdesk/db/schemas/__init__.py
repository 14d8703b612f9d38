from .task import (
    TASK_CREATE_RULES, TASK_UPDATE_RULES, TaskResponse, TaskPage,
    ValidationErrorResponse, ErrorResponse, HealthResponse
)

__all__ = [
    "TASK_CREATE_RULES", "TASK_UPDATE_RULES", "TaskResponse", "TaskPage",
    "ValidationErrorResponse", "ErrorResponse", "HealthResponse",
]
