"""Response Schemas — immutable JSON envelopes returned by every route.

Invariants:
    - All models frozen: request-scoped values, never mutated after construction
    - Timestamps are timezone-aware UTC and serialize as RFC 3339
    - Field order matches the wire contract (pydantic preserves declaration order)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.data import DataPayload


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HealthStatus(BaseModel):
    """Liveness payload — uptime rendered as a duration string."""
    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    uptime: str
    version: str


class ServerInfo(BaseModel):
    """Host and version details for /api/info."""
    model_config = ConfigDict(frozen=True)

    version: str
    hostname: str
    timestamp: datetime = Field(default_factory=utc_now)
    message: str = "Server information retrieved successfully"


class EchoResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    timestamp: datetime = Field(default_factory=utc_now)


class DataResult(BaseModel):
    """Acknowledgement for an accepted /api/data payload."""
    model_config = ConfigDict(frozen=True)

    success: bool = True
    data: DataPayload
    timestamp: datetime = Field(default_factory=utc_now)


class ErrorBody(BaseModel):
    """Uniform error envelope for every 4xx/5xx JSON response."""
    model_config = ConfigDict(frozen=True)

    error: str
    timestamp: datetime = Field(default_factory=utc_now)
