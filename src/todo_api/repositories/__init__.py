"""In-memory repositories encapsulating storage of domain entities."""

from __future__ import annotations

from .base import BaseRepository
from .tasks import TaskRepository
from .users import UserRepository

__all__ = ["BaseRepository", "TaskRepository", "UserRepository"]
