"""Routes handling registration and login."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from ...deps import AuthServiceDependency, SubmissionDependency
from ...schemas import LoginRequest, UserPublic

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
    description=(
        "Accepts multipart form data (`email`, `password`, `name`, optional `avatar` file) "
        "or a JSON object with the same text fields."
    ),
)
async def register(
    request: Request,
    response: Response,
    submission: SubmissionDependency,
    service: AuthServiceDependency,
) -> UserPublic:
    user = await service.register(
        email=submission.get("email"),
        password=submission.get("password"),
        name=submission.get("name"),
        avatar=submission.file("avatar"),
    )
    response.headers["Location"] = request.app.url_path_for("get_user", user_id=str(user.id))
    return UserPublic.from_entity(user)


@router.post(
    "/login",
    response_model=UserPublic,
    status_code=status.HTTP_200_OK,
    summary="Check an email and password pair",
)
async def login(payload: LoginRequest, service: AuthServiceDependency) -> UserPublic:
    user = await service.login(payload.email, payload.password)
    return UserPublic.from_entity(user)
