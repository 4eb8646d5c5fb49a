"""Conversion between native datetimes and ISO-8601 wire timestamps."""

from .conversion import (
    INVALID_DATETIME,
    date_to_datetime,
    datetime_from_millis,
    datetime_to_date,
    datetime_to_millis,
    is_valid_datetime,
    parse_datetime,
    utc_now,
)
from .conversion_helpers import InvalidDatetime
from .exceptions import InvalidDateError, WireDatetimeError, WireFormatError
from .wire_timestamp import WireTimestamp

__all__ = [
    "INVALID_DATETIME",
    "InvalidDateError",
    "InvalidDatetime",
    "WireDatetimeError",
    "WireFormatError",
    "WireTimestamp",
    "date_to_datetime",
    "datetime_from_millis",
    "datetime_to_date",
    "datetime_to_millis",
    "is_valid_datetime",
    "parse_datetime",
    "utc_now",
]
