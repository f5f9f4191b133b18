"""Data Submission — decodes a flat JSON object and acknowledges it.

Invariants:
    - Route is registered for every method so non-POST requests get the 405 ErrorBody
      instead of the framework's default 405
    - Method is checked before the body is read
    - Body decoding failures (bad JSON, wrong shape, wrong field types) → 400 ErrorBody
    - Absent or null fields decode as ""
    - Extra fields in the payload are dropped, not rejected

Design Decisions:
    - Body parsed by hand (model_validate_json) instead of a typed FastAPI body param:
      FastAPI would validate before the method check and answer 422
"""

from fastapi import APIRouter, Request, status
from pydantic import ValidationError

from app.api.routes import ACCEPTED_METHODS
from app.core.errors import InvalidPayloadError, MethodNotAllowedError
from app.schemas.data import DataPayload
from app.schemas.responses import DataResult

router = APIRouter(prefix="/api", tags=["data"])


@router.api_route(
    "/data", methods=ACCEPTED_METHODS,
    response_model=DataResult, status_code=status.HTTP_201_CREATED,
)
async def submit_data(request: Request):
    """Accept a {"name", "value"} object and echo it back."""
    if request.method != "POST":
        raise MethodNotAllowedError("POST")
    raw = await request.body()
    try:
        payload = DataPayload.model_validate_json(raw)
    except ValidationError:
        raise InvalidPayloadError()
    return DataResult(success=True, data=payload)
