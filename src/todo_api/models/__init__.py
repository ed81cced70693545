"""Domain models exposed by the service."""

from __future__ import annotations

from .common import Entity, utcnow
from .task import Task
from .user import User, normalize_email

__all__ = [
    "Entity",
    "Task",
    "User",
    "normalize_email",
    "utcnow",
]
