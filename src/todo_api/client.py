"""Synchronous HTTP client for the task board API.

Any ``httpx.Client`` can be injected, which lets tests drive an in-process
application through Starlette's ``TestClient``.
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Any

import httpx

from .schemas import TaskRead, UserPublic
from .validation import (
    ValidationResult,
    validate_email,
    validate_name,
    validate_password,
    validate_task_title,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"
DEFAULT_TIMEOUT = httpx.Timeout(30.0)


class ApiClientError(Exception):
    """Raised when the server answers with a non-success status."""

    def __init__(self, status_code: int, message: str, code: str | None = None) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.code = code


class InvalidInputError(ValueError):
    """Raised before any request is sent when a field fails its client-side check."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def _require_valid(field: str, result: ValidationResult) -> None:
    if not result.is_valid:
        raise InvalidInputError(field, result.message or "Invalid value.")


def _file_part(field: str, path: Path) -> dict[str, tuple[str, bytes, str]]:
    content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return {field: (path.name, path.read_bytes(), content_type)}


class TaskApiClient:
    """Thin wrapper mapping each API route to a method returning parsed models."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        api_prefix: str = "/api",
        http_client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url, timeout=DEFAULT_TIMEOUT)
        self._prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = self._http.request(method, f"{self._prefix}{path}", **kwargs)
        if response.is_success:
            return response
        message = response.reason_phrase or "Request failed"
        code: str | None = None
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            message = str(payload.get("message", message))
            code = payload.get("code")
        logger.debug(
            "API request failed",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )
        raise ApiClientError(response.status_code, message, code)

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/health").json()

    def list_tasks(self) -> list[TaskRead]:
        return [TaskRead.model_validate(item) for item in self._request("GET", "/tasks").json()]

    def get_task(self, task_id: int) -> TaskRead:
        return TaskRead.model_validate(self._request("GET", f"/tasks/{task_id}").json())

    def create_task(
        self,
        title: str,
        description: str = "",
        *,
        image: Path | str | None = None,
    ) -> TaskRead:
        _require_valid("title", validate_task_title(title))
        files = _file_part("image", Path(image)) if image is not None else None
        response = self._request(
            "POST",
            "/tasks",
            data={"title": title, "description": description},
            files=files,
        )
        return TaskRead.model_validate(response.json())

    def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        is_completed: bool | None = None,
    ) -> TaskRead:
        if title is not None:
            _require_valid("title", validate_task_title(title))
        body = {"title": title, "description": description, "isCompleted": is_completed}
        response = self._request(
            "PUT",
            f"/tasks/{task_id}",
            json={key: value for key, value in body.items() if value is not None},
        )
        return TaskRead.model_validate(response.json())

    def toggle_task(self, task_id: int) -> TaskRead:
        return TaskRead.model_validate(self._request("PATCH", f"/tasks/{task_id}/toggle").json())

    def delete_task(self, task_id: int) -> None:
        self._request("DELETE", f"/tasks/{task_id}")

    def register(
        self,
        email: str,
        password: str,
        name: str = "",
        *,
        avatar: Path | str | None = None,
    ) -> UserPublic:
        _require_valid("email", validate_email(email))
        _require_valid("password", validate_password(password))
        if name:
            _require_valid("name", validate_name(name))
        files = _file_part("avatar", Path(avatar)) if avatar is not None else None
        response = self._request(
            "POST",
            "/auth/register",
            data={"email": email, "password": password, "name": name},
            files=files,
        )
        return UserPublic.model_validate(response.json())

    def login(self, email: str, password: str) -> UserPublic:
        _require_valid("email", validate_email(email))
        _require_valid("password", validate_password(password, require_mixed=False))
        response = self._request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
        )
        return UserPublic.model_validate(response.json())

    def get_user(self, user_id: int) -> UserPublic:
        return UserPublic.model_validate(self._request("GET", f"/users/{user_id}").json())

    def update_user(
        self,
        user_id: int,
        name: str | None = None,
        *,
        avatar: Path | str | None = None,
    ) -> UserPublic:
        """Rename the user and/or replace their avatar; ``None`` leaves the name as is."""
        data: dict[str, str] = {}
        if name is not None:
            _require_valid("name", validate_name(name))
            data["name"] = name
        files = _file_part("avatar", Path(avatar)) if avatar is not None else None
        response = self._request("PUT", f"/users/{user_id}", data=data, files=files)
        return UserPublic.model_validate(response.json())

    def download(self, ref: str) -> bytes:
        """Fetch an uploaded file by the reference found in ``imageUrl``/``avatarUrl``."""
        response = self._http.get(ref)
        if not response.is_success:
            raise ApiClientError(response.status_code, response.reason_phrase or "Download failed")
        return response.content


__all__ = ["ApiClientError", "DEFAULT_BASE_URL", "InvalidInputError", "TaskApiClient"]
