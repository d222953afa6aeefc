from __future__ import annotations

import re
from datetime import timedelta

_UNIT_SECONDS: dict[str, float] = {
    "ms": 0.001,
    "msec": 0.001,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "h": 3600,
    "hr": 3600,
    "hrs": 3600,
    "hour": 3600,
    "hours": 3600,
    "d": 86400,
    "day": 86400,
    "days": 86400,
    "w": 604800,
    "week": 604800,
    "weeks": 604800,
}

_PART_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([a-z]+)")


def parse_duration(value: str) -> timedelta:
    """Parse a humantime-style duration such as ``90``, ``30s`` or ``1h 30m``.

    A bare number is read as seconds.
    """
    text = value.strip().lower()
    if not text:
        msg = "duration is empty"
        raise ValueError(msg)

    try:
        seconds = float(text)
    except ValueError:
        seconds = _sum_parts(value, text)

    try:
        return timedelta(seconds=seconds)
    except (ValueError, OverflowError) as exc:
        msg = f"duration out of range: {value!r}"
        raise ValueError(msg) from exc


def _sum_parts(value: str, text: str) -> float:
    total = 0.0
    position = 0
    for match in _PART_PATTERN.finditer(text):
        if text[position : match.start()].strip():
            break
        amount, unit = match.groups()
        if unit not in _UNIT_SECONDS:
            msg = f"unknown duration unit: {unit!r}"
            raise ValueError(msg)
        total += float(amount) * _UNIT_SECONDS[unit]
        position = match.end()

    if position == 0 or text[position:].strip():
        msg = f"invalid duration: {value!r}"
        raise ValueError(msg)
    return total
