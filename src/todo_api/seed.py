"""Demo fixtures loaded into the in-memory store for local development."""

from __future__ import annotations

import logging
from datetime import timedelta

from .models import Task, utcnow
from .repositories import TaskRepository

logger = logging.getLogger(__name__)

_DEMO_TASKS: tuple[tuple[str, str, bool, timedelta], ...] = (
    ("Buy groceries", "Milk, bread, eggs", False, timedelta()),
    ("Finish homework", "Maths and physics", False, timedelta(hours=2)),
    ("Clean the flat", "Vacuum and mop the floors", True, timedelta(days=1)),
    ("Call mum", "", False, timedelta(minutes=30)),
    ("Go to the gym", "Workout at 18:00", False, timedelta()),
)


def seed_demo_tasks(repository: TaskRepository) -> list[Task]:
    """Insert the demo tasks unless the repository already holds data."""
    if repository.count():
        return []
    now = utcnow()
    created = [
        repository.add(
            Task(
                title=title,
                description=description,
                is_completed=is_completed,
                created_at=now - age,
            )
        )
        for title, description, is_completed, age in _DEMO_TASKS
    ]
    logger.info("Seeded demo tasks", extra={"count": len(created)})
    return created


__all__ = ["seed_demo_tasks"]
