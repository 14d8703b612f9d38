"""
HTTP-клиент к API задач.

Повторяет поведение страницы /static/tasks.js: 204 без разбора тела,
JSON с откатом на сырой текст, ошибка с полями status/data/message.
"""
import json
from typing import Any, Dict, Optional
import httpx
from taskdesk.core.config import settings

API_BASE = f"{settings.API_PREFIX}/tasks"


class ClientError(Exception):
    """Базовая ошибка клиента"""

    def __init__(self, message: str, status: int = 0, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data


class ApiError(ClientError):
    """Сервер ответил кодом ошибки"""


class TransportError(ClientError):
    """Сетевая ошибка: ответа нет"""


def parse_body(response: httpx.Response) -> Any:
    if response.status_code == 204:
        return None

    text = response.text
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def format_error(err: Any) -> str:
    """
    Текст ошибки для пользователя.

    Для ошибок валидации - общее сообщение и по строке на каждое поле.
    """
    data = getattr(err, "data", None)
    message = getattr(err, "message", None)

    if isinstance(data, dict) and isinstance(data.get("errors"), dict):
        lines = [message or "Validation error"]
        for field, messages in data["errors"].items():
            lines.append(f"{field}: {', '.join(str(m) for m in messages)}")
        return "\n".join(lines)

    return message if message else str(err)


class TaskClient:
    """Клиент API задач"""

    def __init__(self, http: Optional[httpx.Client] = None, base_url: Optional[str] = None):
        if http is None:
            base_url = base_url or f"http://{settings.API_HOST}:{settings.API_PORT}"
            http = httpx.Client(base_url=base_url, timeout=10.0)
        self.http = http

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "TaskClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        headers = {"Accept": "application/json"}
        content = None
        if payload is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(payload)

        try:
            response = self.http.request(method, url, headers=headers, content=content)
        except httpx.TransportError as e:
            raise TransportError(f"Network error: {e}") from e

        data = parse_body(response)
        if response.is_error:
            message = data.get("message") if isinstance(data, dict) else None
            raise ApiError(
                message or f"Request failed with status {response.status_code}",
                status=response.status_code,
                data=data
            )
        return data

    def list_tasks(self, page: int = 1) -> Dict[str, Any]:
        """Страница задач в том виде, как ее отдает сервер"""
        return self.request("GET", f"{API_BASE}?page={page}")

    def create_task(self, title: str) -> Dict[str, Any]:
        return self.request("POST", API_BASE, {"title": title})

    def get_task(self, task_id: int) -> Dict[str, Any]:
        return self.request("GET", f"{API_BASE}/{task_id}")

    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        done: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Частичное обновление: отправляются только заданные поля"""
        payload: Dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        if done is not None:
            payload["done"] = done
        return self.request("PATCH", f"{API_BASE}/{task_id}", payload)

    def delete_task(self, task_id: int) -> None:
        self.request("DELETE", f"{API_BASE}/{task_id}")

    def health(self) -> Dict[str, Any]:
        return self.request("GET", "/health")
