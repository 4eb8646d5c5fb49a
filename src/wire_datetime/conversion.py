"""
Conversion between native datetimes and wire timestamps.

``date_to_datetime`` encodes a native datetime into a ``WireTimestamp`` and
``datetime_to_date`` decodes it back. Decoding is lenient: a wire timestamp
that does not parse yields ``INVALID_DATETIME``, and encoding that value raises
``InvalidDateError``. Use ``parse_datetime`` to reject bad strings up front.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from .constants import TIMESTAMP_FIELD
from .conversion_helpers import (
    INVALID_DATETIME,
    InvalidDatetime,
    format_iso_utc,
    is_valid_datetime,
    millis_to_utc,
    parse_iso_utc,
    truncate_to_millis,
    utc_to_millis,
)
from .exceptions import InvalidDateError
from .wire_timestamp import WireTimestamp


def date_to_datetime(date: datetime | InvalidDatetime) -> WireTimestamp:
    """
    Encode a native datetime as a wire timestamp.

    Args:
        date: Datetime to encode; naive values are read as UTC

    Returns:
        WireTimestamp holding the UTC millisecond ISO-8601 string

    Raises:
        InvalidDateError: If date is INVALID_DATETIME
        TypeError: If date is not a datetime
    """
    return WireTimestamp(timestamp=format_iso_utc(date))


def datetime_to_date(date_time: Any) -> datetime | InvalidDatetime:
    """
    Decode a wire timestamp into a native datetime.

    Never raises for malformed strings; returns INVALID_DATETIME instead so
    callers check validity with ``is_valid_datetime``. Accepts a WireTimestamp
    or a raw ``{"timestamp": ...}`` payload.
    """
    if isinstance(date_time, Mapping):
        return parse_iso_utc(date_time.get(TIMESTAMP_FIELD))
    return parse_iso_utc(getattr(date_time, TIMESTAMP_FIELD, None))


def parse_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 string, rejecting anything that is not a date-time.

    Accepts every form ``isoparse`` accepts, including reduced precision
    (``"2024"``) and week dates (``"2024-W01-1"``); a missing offset reads as UTC.

    Raises:
        InvalidDateError: If value does not parse
    """
    parsed = parse_iso_utc(value)
    if not is_valid_datetime(parsed):
        raise InvalidDateError.expected_datetime_string(value)
    return parsed


def datetime_from_millis(millis: int | float) -> datetime | InvalidDatetime:
    """Build a UTC datetime from epoch milliseconds; non-finite or out-of-range gives INVALID_DATETIME."""
    return millis_to_utc(millis)


def datetime_to_millis(date: datetime | InvalidDatetime) -> int | float:
    """Return epoch milliseconds, or NaN for INVALID_DATETIME."""
    if isinstance(date, InvalidDatetime):
        return date.timestamp()
    if not isinstance(date, datetime):
        raise TypeError(f"Unsupported datetime value type: {type(date)!r}")
    return utc_to_millis(date)


def utc_now() -> datetime:
    """Get current UTC time truncated to millisecond precision."""
    return truncate_to_millis(datetime.now(timezone.utc))


__all__ = [
    "INVALID_DATETIME",
    "date_to_datetime",
    "datetime_from_millis",
    "datetime_to_date",
    "datetime_to_millis",
    "is_valid_datetime",
    "parse_datetime",
    "utc_now",
]
