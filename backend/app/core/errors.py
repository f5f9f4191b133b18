"""Error Hierarchy — typed exceptions for every failure mode of the demo server.

Invariants:
    - Every request error has a code (str), an http_status and a timestamp
    - to_response() produces the uniform envelope {"error": ..., "timestamp": ...}
    - Client errors (400-level) are recoverable and never affect other requests
    - Lifecycle errors are fatal: the entry point logs them and exits non-zero

Design Decisions:
    - Single hierarchy with DemoServerError base: FastAPI global handler catches all
    - Lifecycle errors sit outside DemoServerError (never rendered as HTTP responses)
"""

from datetime import datetime, timezone

from app.schemas.responses import ErrorBody


class DemoServerError(Exception):
    """Base exception for all request-level errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to the ErrorBody envelope."""
        body = ErrorBody(error=self.message, timestamp=self.timestamp)
        return body.model_dump(mode="json")


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingQueryParameterError(DemoServerError):
    """Required query parameter absent or empty."""
    def __init__(self, parameter: str):
        super().__init__(
            f"Missing '{parameter}' query parameter",
            "MISSING_QUERY_PARAMETER", 400,
        )
        self.parameter = parameter


class InvalidPayloadError(DemoServerError):
    """Request body could not be decoded into the expected object."""
    def __init__(self):
        super().__init__(
            "Invalid JSON payload",
            "INVALID_PAYLOAD", 400,
        )


class MethodNotAllowedError(DemoServerError):
    """Route only accepts a single method."""
    def __init__(self, allowed: str):
        super().__init__(
            f"Method not allowed. Use {allowed}",
            "METHOD_NOT_ALLOWED", 405,
        )
        self.allowed = allowed


# ─── Lifecycle Errors (fatal) ───────────────────────────────────

class ServerLifecycleError(Exception):
    """Base for listener start/stop failures."""


class ListenerStartupError(ServerLifecycleError):
    """Listener exited before a stop was requested (bind failure, crash)."""
    def __init__(self, host: str, port: int, reason: str = "listener exited"):
        super().__init__(f"Server failed to start on {host}:{port}: {reason}")
        self.host = host
        self.port = port


class ShutdownTimeoutError(ServerLifecycleError):
    """In-flight requests did not drain before the shutdown deadline."""
    def __init__(self, timeout: float):
        super().__init__(
            f"Server forced to shutdown: connections still open after {timeout:g}s",
        )
        self.timeout = timeout
