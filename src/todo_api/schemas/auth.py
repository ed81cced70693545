"""Schemas describing authentication payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    email: str = Field(default="")
    password: str = Field(default="")


__all__ = ["LoginRequest"]
