"""Home — static welcome document listing the other endpoints."""

from fastapi import APIRouter, status

from app.api.routes import ACCEPTED_METHODS
from app.core.runtime import VERSION

router = APIRouter(tags=["home"])

WELCOME_MESSAGE = "Welcome to Go HTTP Server!"
ENDPOINTS = "/health, /api/info, /api/echo?message=<text>, /api/data (POST)"


@router.api_route("/", methods=ACCEPTED_METHODS, status_code=status.HTTP_200_OK)
async def home() -> dict[str, str]:
    return {
        "message": WELCOME_MESSAGE,
        "version": VERSION,
        "endpoints": ENDPOINTS,
    }
