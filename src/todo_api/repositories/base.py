"""Base repository implementation backed by a lock-guarded in-memory mapping."""

from __future__ import annotations

import dataclasses
from itertools import count
from threading import Lock
from typing import Callable, Generic, TypeVar

from ..models import Entity

ModelType = TypeVar("ModelType", bound=Entity)


class BaseRepository(Generic[ModelType]):
    """Provide shared persistence helpers for repositories.

    Every public method takes the repository lock, so identifiers are unique
    and the collection stays consistent when requests run concurrently.
    Callers always receive copies; the stored records are only changed through
    :meth:`add`, :meth:`update` and :meth:`delete`.
    """

    def __init__(self) -> None:
        self._items: dict[int, ModelType] = {}
        self._ids = count(1)
        self._lock = Lock()

    def get(self, entity_id: int) -> ModelType | None:
        """Retrieve a model instance by its identifier."""
        with self._lock:
            item = self._items.get(entity_id)
            return dataclasses.replace(item) if item is not None else None

    def list(self) -> list[ModelType]:
        """Return all entities, newest first."""
        with self._lock:
            items = [dataclasses.replace(item) for item in self._items.values()]
        items.sort(key=lambda item: (item.created_at, item.id), reverse=True)
        return items

    def add(self, instance: ModelType) -> ModelType:
        """Assign an identifier to ``instance`` and store it."""
        with self._lock:
            self._check_insert_locked(instance)
            stored = dataclasses.replace(instance, id=next(self._ids))
            self._items[stored.id] = stored
            return dataclasses.replace(stored)

    def update(
        self,
        entity_id: int,
        mutator: Callable[[ModelType], None],
    ) -> ModelType | None:
        """Apply ``mutator`` to a copy of the entity and store the result.

        Returns ``None`` when the entity does not exist. If ``mutator`` raises,
        the stored entity is left untouched.
        """
        with self._lock:
            current = self._items.get(entity_id)
            if current is None:
                return None
            candidate = dataclasses.replace(current)
            mutator(candidate)
            candidate.id = current.id
            candidate.created_at = current.created_at
            self._items[entity_id] = candidate
            return dataclasses.replace(candidate)

    def delete(self, entity_id: int) -> ModelType | None:
        """Remove an entity, returning it or ``None`` if it was absent."""
        with self._lock:
            return self._items.pop(entity_id, None)

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        """Drop every stored entity. Identifiers are not reused afterwards."""
        with self._lock:
            self._items.clear()

    def _check_insert_locked(self, instance: ModelType) -> None:
        """Hook for uniqueness checks; runs while the lock is held."""
