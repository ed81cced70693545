from __future__ import annotations

import pytest

from todo_api.validation import (
    validate_confirm_password,
    validate_email,
    validate_name,
    validate_password,
    validate_task_title,
)


@pytest.mark.parametrize(
    ("email", "message"),
    [
        ("", "Email is required."),
        ("not-an-email", "Invalid email format."),
        ("user@host", "Invalid email format."),
        ("user@example.com", None),
        ("  first.last+tag@mail.example.org ", None),
    ],
)
def test_validate_email(email: str, message: str | None) -> None:
    result = validate_email(email)
    assert result.message == message
    assert result.is_valid is (message is None)


def test_validate_password_rules() -> None:
    assert validate_password("").message == "Password is required."
    assert validate_password("a1b2").message == "Password must be at least 6 characters."
    assert validate_password("abcdefg").message == "Password must contain a digit."
    assert validate_password("1234567").message == "Password must contain a letter."
    assert validate_password("abc123").is_valid


def test_login_password_skips_composition_rule() -> None:
    assert validate_password("abcdef", require_mixed=False).is_valid
    assert not validate_password("abc", require_mixed=False).is_valid


def test_validate_confirm_password() -> None:
    assert validate_confirm_password("abc123", "").message == "Please confirm the password."
    assert validate_confirm_password("abc123", "abc124").message == "Passwords do not match."
    assert validate_confirm_password("abc123", "abc123").is_valid


def test_validate_name_bounds() -> None:
    assert validate_name("  ").message == "Name is required."
    assert not validate_name("A").is_valid
    assert validate_name("Al").is_valid
    assert validate_name("x" * 50).is_valid
    assert validate_name("x" * 51).message == "Name must be at most 50 characters."


def test_validate_task_title() -> None:
    assert validate_task_title("").message == "Title is required."
    assert validate_task_title("Buy milk").is_valid
    assert validate_task_title("t" * 100).is_valid
    assert not validate_task_title("t" * 101).is_valid
