"""Password hashing helpers.

Two schemes are supported. ``pbkdf2_sha256`` goes through passlib and salts
every hash individually. ``legacy_sha256`` reproduces the hashes issued by the
first version of the service: a single SHA-256 round over the password joined
with one static salt, base64 encoded. It is weak and only kept so existing
hashes keep verifying.
"""

from __future__ import annotations

import base64
import hashlib
import hmac

from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from ..errors import ValidationError
from .config import PasswordScheme, Settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

LEGACY_SCHEME: PasswordScheme = "legacy_sha256"


def legacy_password_hash(password: str, salt: str) -> str:
    """Return the static-salt SHA-256 digest used by the legacy scheme."""

    digest = hashlib.sha256(f"{password}{salt}".encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def get_password_hash(password: str, settings: Settings) -> str:
    """Hash ``password`` with the scheme configured in ``settings``."""

    if settings.password_scheme == LEGACY_SCHEME:
        return legacy_password_hash(password, settings.password_salt)
    try:
        return pwd_context.hash(password)
    except PasswordSizeError as exc:
        raise ValidationError(
            "Password is too long.",
            details={"field": "password", "max_length": exc.max_size},
        ) from exc


def verify_password(plain_password: str, hashed_password: str, settings: Settings) -> bool:
    """Verify a plain password against a hash produced by either scheme."""

    if pwd_context.identify(hashed_password) is not None:
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except PasswordSizeError:
            return False
    expected = legacy_password_hash(plain_password, settings.password_salt)
    return hmac.compare_digest(expected, hashed_password)


__all__ = [
    "LEGACY_SCHEME",
    "get_password_hash",
    "legacy_password_hash",
    "pwd_context",
    "verify_password",
]
