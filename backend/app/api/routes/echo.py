"""Echo — returns the `message` query parameter with a server timestamp.

Invariants:
    - Missing or empty `message` → 400 ErrorBody, never a validation 422
    - A repeated `message` parameter uses its first occurrence
"""

from fastapi import APIRouter, Request, status

from app.api.routes import ACCEPTED_METHODS
from app.core.errors import MissingQueryParameterError
from app.schemas.responses import EchoResult

router = APIRouter(prefix="/api", tags=["echo"])


@router.api_route(
    "/echo", methods=ACCEPTED_METHODS,
    response_model=EchoResult, status_code=status.HTTP_200_OK,
)
async def echo(request: Request):
    """Echo the message back verbatim."""
    values = request.query_params.getlist("message")
    message = values[0] if values else ""
    if not message:
        raise MissingQueryParameterError("message")
    return EchoResult(message=message)
