"""Client-side input rules applied before a request is sent.

These mirror the form checks of the mobile client and are stricter than the
server in places (e.g. the password composition rule), so a form can show
errors without a round trip.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}$")

PASSWORD_MIN_LENGTH = 6
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
TITLE_MAX_LENGTH = 100


@dataclass(slots=True, frozen=True)
class ValidationResult:
    """Outcome of a single field check; ``message`` is set when invalid."""

    message: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.message is None


VALID = ValidationResult()


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(message=message)


def validate_email(email: str) -> ValidationResult:
    if not email:
        return _invalid("Email is required.")
    if not _EMAIL_PATTERN.match(email.strip()):
        return _invalid("Invalid email format.")
    return VALID


def validate_password(password: str, *, require_mixed: bool = True) -> ValidationResult:
    """Check length and, for new passwords, that digits and letters are mixed."""
    if not password:
        return _invalid("Password is required.")
    if len(password) < PASSWORD_MIN_LENGTH:
        return _invalid(f"Password must be at least {PASSWORD_MIN_LENGTH} characters.")
    if require_mixed:
        if not any(char.isdigit() for char in password):
            return _invalid("Password must contain a digit.")
        if not any(char.isalpha() for char in password):
            return _invalid("Password must contain a letter.")
    return VALID


def validate_confirm_password(password: str, confirmation: str) -> ValidationResult:
    if not confirmation:
        return _invalid("Please confirm the password.")
    if password != confirmation:
        return _invalid("Passwords do not match.")
    return VALID


def validate_name(name: str) -> ValidationResult:
    stripped = name.strip()
    if not stripped:
        return _invalid("Name is required.")
    if len(stripped) < NAME_MIN_LENGTH:
        return _invalid(f"Name must be at least {NAME_MIN_LENGTH} characters.")
    if len(stripped) > NAME_MAX_LENGTH:
        return _invalid(f"Name must be at most {NAME_MAX_LENGTH} characters.")
    return VALID


def validate_task_title(title: str) -> ValidationResult:
    if not title.strip():
        return _invalid("Title is required.")
    if len(title) > TITLE_MAX_LENGTH:
        return _invalid(f"Title must be at most {TITLE_MAX_LENGTH} characters.")
    return VALID


__all__ = [
    "ValidationResult",
    "validate_confirm_password",
    "validate_email",
    "validate_name",
    "validate_password",
    "validate_task_title",
]
