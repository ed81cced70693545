"""Reusable FastAPI dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from .api.forms import Submission, read_submission
from .core.config import Settings
from .repositories import TaskRepository, UserRepository
from .services import AuthService, TaskService, UserService
from .storage import UploadStorage


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


def get_task_repository(request: Request) -> TaskRepository:
    return request.app.state.task_repository


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_upload_storage(request: Request) -> UploadStorage:
    return request.app.state.upload_storage


SettingsDependency = Annotated[Settings, Depends(get_app_settings)]
TaskRepositoryDependency = Annotated[TaskRepository, Depends(get_task_repository)]
UserRepositoryDependency = Annotated[UserRepository, Depends(get_user_repository)]
UploadStorageDependency = Annotated[UploadStorage, Depends(get_upload_storage)]
SubmissionDependency = Annotated[Submission, Depends(read_submission)]


def get_task_service(
    repository: TaskRepositoryDependency,
    storage: UploadStorageDependency,
) -> TaskService:
    return TaskService(repository, storage)


def get_user_service(
    repository: UserRepositoryDependency,
    storage: UploadStorageDependency,
    settings: SettingsDependency,
) -> UserService:
    return UserService(repository, storage, settings)


def get_auth_service(
    repository: UserRepositoryDependency,
    storage: UploadStorageDependency,
    settings: SettingsDependency,
) -> AuthService:
    return AuthService(repository, storage, settings)


TaskServiceDependency = Annotated[TaskService, Depends(get_task_service)]
UserServiceDependency = Annotated[UserService, Depends(get_user_service)]
AuthServiceDependency = Annotated[AuthService, Depends(get_auth_service)]


__all__ = [
    "AuthServiceDependency",
    "SettingsDependency",
    "SubmissionDependency",
    "TaskServiceDependency",
    "UploadStorageDependency",
    "UserServiceDependency",
    "get_app_settings",
]
