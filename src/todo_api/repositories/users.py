"""Repository for user records."""

from __future__ import annotations

import dataclasses

from ..errors import ConflictError
from ..models import User, normalize_email
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Concrete repository for ``User`` entities keyed by normalised email."""

    def get_by_email(self, email: str) -> User | None:
        """Return the user registered under ``email`` if it exists."""
        normalized = normalize_email(email)
        with self._lock:
            for user in self._items.values():
                if user.email == normalized:
                    return dataclasses.replace(user)
        return None

    def _check_insert_locked(self, instance: User) -> None:
        normalized = normalize_email(instance.email)
        if any(user.email == normalized for user in self._items.values()):
            raise ConflictError("Email is already registered.", details={"email": normalized})
