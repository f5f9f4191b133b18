"""Demo Server API — FastAPI application factory and module-level app.

Invariants:
    - Route table is exactly five exact-match paths; docs/OpenAPI routes disabled
    - Routes registered explicitly (no auto-discovery)
    - Middleware chain CORS(Logging(handler)) wraps every route
    - Global error handlers map DemoServerError → ErrorBody JSON responses

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Logging configured by the entry point, not the lifespan: the app may be
      served by an external uvicorn that owns logging
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.middleware import install_middleware
from app.api.routes import data, echo, health, home, info
from app.core.runtime import VERSION

logger = logging.getLogger(__name__)

ROUTE_SUMMARY = (
    "GET  /",
    "GET  /health",
    "GET  /api/info",
    "GET  /api/echo?message=<text>",
    "POST /api/data",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    logger.info(f"Server version: {VERSION}")
    logger.info("Available endpoints:")
    for line in ROUTE_SUMMARY:
        logger.info(f"  {line}")
    yield
    logger.info("Demo server application shutting down")


def create_app() -> FastAPI:
    """Build the app: routes, middleware chain, error handlers."""
    app = FastAPI(
        title="Demo HTTP Server",
        version=VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.include_router(home.router)
    app.include_router(health.router)
    app.include_router(info.router)
    app.include_router(echo.router)
    app.include_router(data.router)

    install_middleware(app)
    register_error_handlers(app)
    return app


app = create_app()
