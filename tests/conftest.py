from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from todo_api.core.config import Settings
from todo_api.main import create_app
from todo_api.repositories import TaskRepository, UserRepository
from todo_api.services import AuthService, TaskService
from todo_api.storage import UploadStorage

PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir: Path) -> Settings:
    return Settings(environment="test", upload_dir=upload_dir)


@pytest.fixture
def storage(settings: Settings) -> UploadStorage:
    storage = UploadStorage(settings.upload_dir, settings.upload_url_prefix)
    storage.ensure_directory()
    return storage


@pytest.fixture
def task_service(storage: UploadStorage) -> TaskService:
    return TaskService(TaskRepository(), storage)


@pytest.fixture
def auth_service(storage: UploadStorage, settings: Settings) -> AuthService:
    return AuthService(UserRepository(), storage, settings)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http_client:
        yield http_client


@pytest.fixture
def uploaded_path(storage: UploadStorage) -> Callable[[str], Path]:
    """Map an ``imageUrl``/``avatarUrl`` reference to the file on disk."""

    return storage.resolve


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES
