"""Helper modules for timestamp conversion."""

from .invalid_datetime import INVALID_DATETIME, InvalidDatetime, is_valid_datetime
from .iso_formatter import format_iso_utc, to_utc
from .iso_parser import millis_to_utc, parse_iso_utc, truncate_to_millis, utc_to_millis

__all__ = [
    "INVALID_DATETIME",
    "InvalidDatetime",
    "format_iso_utc",
    "is_valid_datetime",
    "millis_to_utc",
    "parse_iso_utc",
    "to_utc",
    "truncate_to_millis",
    "utc_to_millis",
]
