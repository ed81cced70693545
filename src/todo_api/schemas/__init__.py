"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import LoginRequest
from .system import ErrorResponse, HealthCheckResponse, RootResponse
from .task import TaskRead, TaskUpdate
from .user import UserPublic

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "RootResponse",
    "TaskRead",
    "TaskUpdate",
    "UserPublic",
]
