"""Server Info — version and hostname of the serving process.

Invariants:
    - Hostname lookup failures never surface: the response carries "unknown" instead
"""

import logging
import socket

from fastapi import APIRouter, status

from app.api.routes import ACCEPTED_METHODS
from app.core.runtime import VERSION
from app.schemas.responses import ServerInfo

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["info"])

UNKNOWN_HOSTNAME = "unknown"


def resolve_hostname() -> str:
    try:
        hostname = socket.gethostname()
    except OSError as e:
        logger.warning(f"Hostname lookup failed: {e}")
        return UNKNOWN_HOSTNAME
    return hostname or UNKNOWN_HOSTNAME


@router.api_route(
    "/info", methods=ACCEPTED_METHODS,
    response_model=ServerInfo, status_code=status.HTTP_200_OK,
)
async def server_info():
    return ServerInfo(version=VERSION, hostname=resolve_hostname())
