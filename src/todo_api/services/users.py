"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

import logging

from ..core.config import Settings
from ..core.security import get_password_hash
from ..errors import NotFoundError
from ..models import User, normalize_email
from ..repositories import UserRepository
from ..storage import IncomingFile, UploadStorage

logger = logging.getLogger(__name__)


class UserService:
    """High-level business operations for ``User`` entities."""

    def __init__(
        self,
        repository: UserRepository,
        storage: UploadStorage,
        settings: Settings,
    ) -> None:
        self._repository = repository
        self._storage = storage
        self._settings = settings

    def create_user(
        self,
        *,
        email: str,
        password: str,
        name: str,
        avatar_url: str | None = None,
    ) -> User:
        """Hash the password and persist a new user record."""
        user = User(
            email=normalize_email(email),
            password_hash=get_password_hash(password, self._settings),
            name=name,
            avatar_url=avatar_url,
        )
        return self._repository.add(user)

    async def get_user(self, user_id: int) -> User:
        """Fetch a user by id."""
        user = self._repository.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found.", details={"user_id": user_id})
        return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Fetch a user by their (case-insensitive) email address."""
        return self._repository.get_by_email(email)

    async def update_profile(
        self,
        user_id: int,
        *,
        name: str | None = None,
        avatar: IncomingFile | None = None,
    ) -> User:
        """Rename a user and/or replace their avatar.

        A blank name leaves the current one in place. A replaced avatar file is
        deleted once the new one is stored.
        """
        await self.get_user(user_id)

        new_avatar_url: str | None = None
        if avatar is not None and not avatar.is_empty:
            new_avatar_url = await self._storage.store(avatar)

        previous_avatar: list[str | None] = []

        def _apply(user: User) -> None:
            if name is not None and name.strip():
                user.name = name.strip()
            if new_avatar_url is not None:
                previous_avatar.append(user.avatar_url)
                user.avatar_url = new_avatar_url

        updated = self._repository.update(user_id, _apply)
        if updated is None:
            await self._storage.delete(new_avatar_url)
            raise NotFoundError(f"User {user_id} not found.", details={"user_id": user_id})

        for stale in previous_avatar:
            await self._storage.delete(stale)
        logger.info(
            "User profile updated",
            extra={"user_id": user_id, "avatar_replaced": new_avatar_url is not None},
        )
        return updated
