"""Shared model base classes and utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


@dataclass(slots=True, kw_only=True)
class Entity:
    """Identity and creation timestamp shared by every stored record.

    ``id`` is assigned by the repository on insert and ``created_at`` is fixed
    at construction; neither changes afterwards.
    """

    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)


__all__ = ["Entity", "utcnow"]
