"""Parsing and comparison of size and modification-time queries."""

from __future__ import annotations

import time
from datetime import datetime, timedelta

_DIGITS = "0123456789"
_OPERATORS = (">", "<", "=")

_SIZE_UNITS = {
    "": 1.0,
    "b": 1.0,
    "k": 1024.0,
    "kb": 1024.0,
    "m": 1024.0**2,
    "mb": 1024.0**2,
    "g": 1024.0**3,
    "gb": 1024.0**3,
}

_TIME_UNITS = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
    "w": 86400 * 7,
    "y": 86400 * 365,
}


def _split_operator(query: str) -> tuple[str, str]:
    if query.startswith(_OPERATORS):
        return query[0], query[1:]
    return "=", query


def _split_number(text: str, allowed: str) -> tuple[str, str]:
    for index, char in enumerate(text):
        if char not in allowed:
            return text[:index], text[index:]
    return text, ""


def parse_and_compare_size(file_size: int, query: str) -> bool:
    """Compare ``file_size`` in bytes with a query such as ``>1.5kb``."""
    op, size_str = _split_operator(query.strip())
    size_str = size_str.strip().lower()
    num_str, unit = _split_number(size_str, _DIGITS + ".")
    try:
        num = float(num_str)
    except ValueError:
        raise ValueError(f"Invalid size number: '{num_str}'") from None
    try:
        multiplier = _SIZE_UNITS[unit.strip()]
    except KeyError:
        raise ValueError(f"Invalid size unit: {unit}") from None
    target = int(num * multiplier)
    if op == ">":
        return file_size > target
    if op == "<":
        return file_size < target
    return file_size == target


def parse_relative_time(time_str: str) -> timedelta:
    """Parse a duration such as ``10m`` or ``2w``."""
    num_str, unit = _split_number(time_str, _DIGITS)
    if not num_str:
        raise ValueError(f"Invalid relative time: '{time_str}'")
    try:
        seconds = _TIME_UNITS[unit.strip()]
    except KeyError:
        raise ValueError("Invalid time unit") from None
    return timedelta(seconds=int(num_str) * seconds)


def parse_absolute_time(time_str: str) -> float:
    """Parse a local date or date-time into a POSIX timestamp."""
    for fmt in ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d"):
        try:
            parsed = datetime.strptime(time_str, fmt)
        except ValueError:
            continue
        return parsed.timestamp()
    raise ValueError("Invalid absolute date format")


def parse_and_compare_time(modified_time: float, query: str) -> bool:
    """Compare a POSIX modification time with a query such as ``>2d``.

    ``>`` means more recent than the threshold, ``<`` older. With ``=`` and a
    bare date, the comparison is by local calendar day.
    """
    op, time_str = _split_operator(query)
    time_str = time_str.strip()

    try:
        threshold = time.time() - parse_relative_time(time_str).total_seconds()
    except ValueError:
        try:
            threshold = parse_absolute_time(time_str)
        except ValueError:
            raise ValueError(f"Invalid date format: '{time_str}'") from None

    if op == ">":
        return modified_time > threshold
    if op == "<":
        return modified_time < threshold
    if len(time_str) == 10:
        modified_day = datetime.fromtimestamp(modified_time).date()
        threshold_day = datetime.fromtimestamp(threshold).date()
        return modified_day == threshold_day
    return modified_time == threshold