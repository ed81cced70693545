"""User domain model."""

from __future__ import annotations

from dataclasses import dataclass

from .common import Entity


def normalize_email(email: str) -> str:
    """Return the canonical form used as the unique user key."""
    return email.strip().lower()


@dataclass(slots=True, kw_only=True)
class User(Entity):
    """A registered account. ``email`` is always stored normalised."""

    email: str
    password_hash: str
    name: str
    avatar_url: str | None = None


__all__ = ["User", "normalize_email"]
