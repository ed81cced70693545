"""Task domain model."""

from __future__ import annotations

from dataclasses import dataclass

from .common import Entity


@dataclass(slots=True, kw_only=True)
class Task(Entity):
    """A to-do item, optionally carrying an uploaded image."""

    title: str
    description: str = ""
    is_completed: bool = False
    image_url: str | None = None


__all__ = ["Task"]
