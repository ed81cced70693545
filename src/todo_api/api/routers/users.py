"""User profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ...deps import SubmissionDependency, UserServiceDependency
from ...schemas import UserPublic

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserPublic, summary="Retrieve a user by id")
async def get_user(user_id: int, service: UserServiceDependency) -> UserPublic:
    return UserPublic.from_entity(await service.get_user(user_id))


@router.put(
    "/{user_id}",
    response_model=UserPublic,
    summary="Update a user's name and/or avatar",
    description="Accepts multipart form data (`name`, optional `avatar` file) or JSON with `name`.",
)
async def update_user(
    user_id: int,
    submission: SubmissionDependency,
    service: UserServiceDependency,
) -> UserPublic:
    user = await service.update_profile(
        user_id,
        name=submission.get("name"),
        avatar=submission.file("avatar"),
    )
    return UserPublic.from_entity(user)
