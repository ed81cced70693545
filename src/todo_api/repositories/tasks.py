"""Repository for task records."""

from __future__ import annotations

from ..models import Task
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Concrete repository holding ``Task`` entities."""
