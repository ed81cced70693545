"""Authentication service encapsulating registration and login."""

from __future__ import annotations

import logging

from ..core.config import Settings
from ..core.security import verify_password
from ..errors import ConflictError, UnauthorizedError, ValidationError
from ..models import User, normalize_email
from ..repositories import UserRepository
from ..storage import IncomingFile, UploadStorage
from .users import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and credential checks.

    No session or token is issued: a successful login only returns the user
    record, so other endpoints cannot tell who is calling.
    """

    def __init__(
        self,
        repository: UserRepository,
        storage: UploadStorage,
        settings: Settings,
    ) -> None:
        self._settings = settings
        self._storage = storage
        self._user_service = UserService(repository, storage, settings)

    def _validate_registration(self, email: str, password: str) -> None:
        if not email.strip():
            raise ValidationError("Email is required.", details={"field": "email"})
        if not password.strip():
            raise ValidationError("Password is required.", details={"field": "password"})
        min_length = self._settings.password_min_length
        if len(password) < min_length:
            raise ValidationError(
                f"Password must be at least {min_length} characters long.",
                details={"field": "password", "min_length": min_length},
            )

    async def register(
        self,
        *,
        email: str | None,
        password: str | None,
        name: str | None = None,
        avatar: IncomingFile | None = None,
    ) -> User:
        email = email or ""
        password = password or ""
        self._validate_registration(email, password)

        normalized = normalize_email(email)
        if await self._user_service.get_user_by_email(normalized) is not None:
            raise ConflictError("Email is already registered.", details={"email": normalized})

        display_name = (name or "").strip() or normalized.split("@", 1)[0]

        avatar_url: str | None = None
        if avatar is not None and not avatar.is_empty:
            avatar_url = await self._storage.store(avatar)

        try:
            user = self._user_service.create_user(
                email=normalized,
                password=password,
                name=display_name,
                avatar_url=avatar_url,
            )
        except Exception:
            await self._storage.delete(avatar_url)
            raise

        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def login(self, email: str | None, password: str | None) -> User:
        """Return the user matching the credentials or raise ``UnauthorizedError``."""
        user = await self._user_service.get_user_by_email(email or "")
        if user is None or not verify_password(password or "", user.password_hash, self._settings):
            logger.info("Login rejected")
            raise UnauthorizedError()
        logger.info("User logged in", extra={"user_id": user.id})
        return user
