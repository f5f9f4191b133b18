"""Tests for runtime values and format_duration — pure, no IO."""

import pytest

from app.core import runtime
from app.core.runtime import format_duration, uptime_seconds


@pytest.mark.parametrize("seconds,expected", [
    (0, "0s"),
    (0.000012, "12µs"),
    (0.0125, "12.5ms"),
    (0.15, "150ms"),
    (1, "1s"),
    (2.5, "2.5s"),
    (59.123456, "59.123456s"),
    (60, "1m0s"),
    (240, "4m0s"),
    (3723.456, "1h2m3.456s"),
    (3600, "1h0m0s"),
    (90061, "25h1m1s"),
    (-1.5, "-1.5s"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_sub_microsecond_rounds_to_zero():
    assert format_duration(0.0000001) == "0s"


def test_uptime_measured_from_started_at():
    assert uptime_seconds(runtime.STARTED_AT + 12.5) == pytest.approx(12.5)


def test_uptime_never_negative():
    assert uptime_seconds(runtime.STARTED_AT - 1) == 0.0


def test_uptime_non_decreasing():
    first = uptime_seconds()
    second = uptime_seconds()
    assert second >= first


def test_version_constant():
    assert runtime.VERSION == "1.0.0"
