"""Data Schemas — the one request body the server accepts.

Invariants:
    - name and value are strings (no number-to-string coercion)
    - Absent or null fields decode as "", a top-level null as an empty payload
    - Unknown fields are ignored, not rejected
"""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class DataPayload(BaseModel):
    """Flat object posted to /api/data and echoed back."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    value: str = ""

    @model_validator(mode="before")
    @classmethod
    def null_as_empty(cls, data):
        if data is None:
            return {}
        return data

    @field_validator("name", "value", mode="before")
    @classmethod
    def null_field_as_empty(cls, v):
        if v is None:
            return ""
        return v
