"""Primitive validators shared by request contracts.

Each validator is a total function: it returns the accepted value unchanged
or a :class:`Rejected` record carrying a human-readable reason. Request
models compose them via pydantic ``AfterValidator`` hooks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

IDENTIFIER_PATTERN = re.compile(r"^[0-9]{1,20}$")
TIMESTAMP_PATTERN = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)

IDENTIFIER_REASON = "Must be a numeric string up to 20 digits"
TIMESTAMP_REASON = "Must be a valid ISO 8601 datetime (e.g., 2024-01-01T00:00:00Z)"
CURSOR_REASON = "Must be a non-empty cursor"


@dataclass(frozen=True)
class Rejected:
    """A value refused by a primitive validator."""

    value: object
    reason: str


def validate_identifier(value: object) -> str | Rejected:
    """Accept opaque numeric IDs (1-20 decimal digits)."""
    if isinstance(value, str) and IDENTIFIER_PATTERN.fullmatch(value):
        return value
    return Rejected(value, IDENTIFIER_REASON)


def parse_timestamp(value: str) -> datetime | None:
    """Parse a timestamp into an aware datetime, or None if it is not one.

    Fractional seconds of any length are accepted and truncated to
    microseconds; ``Z`` is read as UTC.
    """
    match = TIMESTAMP_PATTERN.fullmatch(value)
    if not match:
        return None
    base, fraction, offset = match.groups()
    micros = (fraction or "")[:6].ljust(6, "0")
    if offset == "Z":
        offset = "+00:00"
    try:
        return datetime.fromisoformat(f"{base}.{micros}{offset}")
    except ValueError:
        return None


def validate_timestamp(value: object) -> str | Rejected:
    """Accept ISO 8601 datetimes with an explicit timezone."""
    if isinstance(value, str) and parse_timestamp(value) is not None:
        return value
    return Rejected(value, TIMESTAMP_REASON)


def validate_cursor(value: object) -> str | Rejected:
    """Accept any non-empty pagination token."""
    if isinstance(value, str) and value:
        return value
    return Rejected(value, CURSOR_REASON)


def is_before(start: str, end: str) -> bool:
    """Return True when timestamp *start* is strictly earlier than *end*."""
    start_dt = parse_timestamp(start)
    end_dt = parse_timestamp(end)
    if start_dt is None or end_dt is None:
        return False
    return start_dt < end_dt
