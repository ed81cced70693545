"""Health and readiness endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...models import utcnow
from ...schemas.system import HealthCheckResponse

router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def read_health() -> HealthCheckResponse:
    """Return a simple heartbeat payload for health checks."""
    return HealthCheckResponse(status="healthy", timestamp=utcnow())
