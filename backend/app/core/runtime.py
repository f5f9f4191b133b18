"""Process Runtime — write-once values shared by every request, plus duration formatting.

Invariants:
    - VERSION and STARTED_AT are assigned once at import and never reassigned
    - STARTED_AT is a monotonic reading: uptime never decreases, even across clock changes
    - format_duration output is Go-style: "1h2m3.456s", "4m0s", "2.5s", "150ms", "12µs"

Design Decisions:
    - Durations rounded to whole microseconds before formatting (monotonic clock resolution)
"""

import time

VERSION = "1.0.0"
STARTED_AT = time.monotonic()

_MICROSECOND = 1
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE


def uptime_seconds(now: float | None = None) -> float:
    """Seconds elapsed since STARTED_AT (monotonic)."""
    if now is None:
        now = time.monotonic()
    return max(0.0, now - STARTED_AT)


def format_duration(seconds: float) -> str:
    """Render a duration as hours, minutes and fractional seconds."""
    micros = round(seconds * _SECOND)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < _MILLISECOND:
        return f"{sign}{micros}µs"
    if micros < _SECOND:
        return f"{sign}{_decimal(micros, _MILLISECOND)}ms"

    hours, rest = divmod(micros, _HOUR)
    minutes, rest = divmod(rest, _MINUTE)
    parts = [sign]
    if hours:
        parts.append(f"{hours}h")
    if hours or minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{_decimal(rest, _SECOND)}s")
    return "".join(parts)


def _decimal(value: int, unit: int) -> str:
    """value/unit as a decimal string with trailing zeros trimmed."""
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{frac:0{width}d}".rstrip("0")
