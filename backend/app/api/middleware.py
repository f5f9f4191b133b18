"""Middleware Chain — CORS and request logging applied uniformly to every route.

Invariants:
    - MIDDLEWARE_CHAIN is ordered outermost first: CORS(Logging(handler))
    - CORS headers are set on every response that passes through the chain,
      including the 500 rendered for an unhandled route exception
    - OPTIONS on a registered path short-circuits with 200 and an empty body;
      the logging middleware and the route handler never run for it
    - Logged elapsed time covers the inner handler only

Design Decisions:
    - Plain async (request, call_next) functions registered via app.middleware("http")
    - Starlette runs the most recently added middleware first, so install reverses the chain
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status

from app.api.error_handlers import internal_error_response
from app.core.runtime import format_duration

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _is_registered_path(request: Request) -> bool:
    path = request.url.path
    return any(
        getattr(route, "path", None) == path for route in request.app.router.routes
    )


def _remote_addr(request: Request) -> str:
    if request.client is None:
        return "unknown"
    return f"{request.client.host}:{request.client.port}"


async def cors_middleware(request: Request, call_next: CallNext) -> Response:
    """Attach CORS headers; answer preflight requests without dispatching."""
    if request.method == "OPTIONS" and _is_registered_path(request):
        response = Response(status_code=status.HTTP_200_OK)
    else:
        try:
            response = await call_next(request)
        except Exception as e:
            response = internal_error_response(request, e)
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


async def logging_middleware(request: Request, call_next: CallNext) -> Response:
    """Log method, path and peer, then the handler's wall-clock duration."""
    start = time.perf_counter()
    logger.info(
        f"[{request.method}] {request.url.path} {_remote_addr(request)}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "remote_addr": _remote_addr(request),
        },
    )
    response = await call_next(request)
    elapsed = time.perf_counter() - start
    logger.info(
        f"Completed in {format_duration(elapsed)}",
        extra={
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(elapsed * 1000, 3),
        },
    )
    return response


MIDDLEWARE_CHAIN: tuple[Callable[[Request, CallNext], Awaitable[Response]], ...] = (
    cors_middleware,
    logging_middleware,
)


def install_middleware(app: FastAPI) -> None:
    """Register MIDDLEWARE_CHAIN so its first entry is outermost."""
    for middleware in reversed(MIDDLEWARE_CHAIN):
        app.middleware("http")(middleware)
