"""User-facing Pydantic schemas."""

from __future__ import annotations

import dataclasses
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..models import User


class UserPublic(BaseModel):
    """Public representation of a user; the password hash is never exposed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str
    name: str
    avatar_url: str | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserPublic":
        return cls.model_validate(dataclasses.asdict(user))


__all__ = ["UserPublic"]
