"""Response schemas — frozen models, RFC 3339 timestamps, payload decoding."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.schemas.data import DataPayload
from app.schemas.responses import DataResult, EchoResult, ErrorBody


def test_models_are_immutable():
    result = EchoResult(message="hi")
    with pytest.raises(ValidationError):
        result.message = "changed"


def test_timestamps_are_utc_rfc3339():
    body = ErrorBody(error="x", timestamp=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
    assert body.model_dump(mode="json")["timestamp"] == "2026-01-02T03:04:05Z"


def test_default_timestamp_is_timezone_aware():
    assert EchoResult(message="hi").timestamp.tzinfo is not None


def test_payload_drops_unknown_fields():
    payload = DataPayload.model_validate_json('{"name": "n", "value": "v", "x": 1}')
    assert payload.model_dump() == {"name": "n", "value": "v"}


def test_payload_rejects_non_string_values():
    with pytest.raises(ValidationError):
        DataPayload.model_validate_json('{"name": "n", "value": 1}')


def test_data_result_field_order():
    result = DataResult(data=DataPayload(name="n", value="v"))
    assert list(result.model_dump()) == ["success", "data", "timestamp"]
    assert result.success is True


def test_payload_null_document_is_empty():
    assert DataPayload.model_validate_json("null").model_dump() == {"name": "", "value": ""}


def test_payload_null_field_is_empty_string():
    payload = DataPayload.model_validate_json('{"name": null, "value": "v"}')
    assert payload.name == ""
    assert payload.value == "v"
