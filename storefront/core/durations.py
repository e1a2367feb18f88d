"""Parse token lifetimes written as "7d", "12h", "90m" or plain seconds."""

import re
from datetime import timedelta

_DURATION_RE = re.compile(r"^(?P<amount>\d+(?:\.\d+)?)\s*(?P<unit>ms|s|m|h|d|w|y)?$")

_UNIT_SECONDS = {
    "ms": 0.001,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
    "w": 7 * 24 * 60 * 60,
    "y": 365.25 * 24 * 60 * 60,
}


def parse_duration(value: str | int | float | timedelta) -> timedelta:
    """
    Convert a duration to a timedelta.

    Numbers (and numeric strings without a unit) are seconds. Negative or
    malformed values raise ValueError.
    """
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise ValueError("Duration must not be negative")
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        if value < 0:
            raise ValueError("Duration must not be negative")
        return timedelta(seconds=value)
    match = _DURATION_RE.match(str(value).strip().lower())
    if match is None:
        raise ValueError(f"Invalid duration: {value!r} (expected e.g. 7d, 12h, 30m, 45s)")
    amount = float(match.group("amount"))
    unit = match.group("unit") or "s"
    return timedelta(seconds=amount * _UNIT_SECONDS[unit])
