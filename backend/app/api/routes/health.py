"""Health Check — liveness endpoint with process uptime.

Invariants:
    - GET /health always returns 200 while the process is up
    - uptime is measured from the monotonic STARTED_AT, so it never decreases
"""

from fastapi import APIRouter, status

from app.api.routes import ACCEPTED_METHODS
from app.core.runtime import VERSION, format_duration, uptime_seconds
from app.schemas.responses import HealthStatus

router = APIRouter(tags=["health"])


@router.api_route(
    "/health", methods=ACCEPTED_METHODS,
    response_model=HealthStatus, status_code=status.HTTP_200_OK,
)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return HealthStatus(
        status="healthy",
        uptime=format_duration(uptime_seconds()),
        version=VERSION,
    )
