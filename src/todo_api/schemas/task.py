"""Task-related Pydantic schemas.

Field names are exposed in camelCase on the wire to match the mobile client.
"""

from __future__ import annotations

import dataclasses
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models import Task

TASK_READ_EXAMPLE = {
    "id": 1,
    "title": "Buy groceries",
    "description": "Milk, bread, eggs",
    "isCompleted": False,
    "createdAt": "2024-01-01T12:00:00Z",
    "imageUrl": "/uploads/3f2c9a0e4b1d4f7e9a6b5c4d3e2f1a0b.jpg",
}


class TaskUpdate(BaseModel):
    """Partial update; omitted or null fields keep their current value."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Buy groceries and coffee",
                "isCompleted": True,
            }
        },
    )

    title: str | None = Field(default=None)
    description: str | None = Field(default=None)
    is_completed: bool | None = Field(default=None)


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: int
    title: str
    description: str = ""
    is_completed: bool
    created_at: datetime
    image_url: str | None = None

    @classmethod
    def from_entity(cls, task: Task) -> "TaskRead":
        return cls.model_validate(dataclasses.asdict(task))


__all__ = [
    "TaskRead",
    "TaskUpdate",
]
