from __future__ import annotations

"""Shared ISO-8601 parsing helpers."""

import logging
import math
from datetime import datetime, timedelta, timezone

from dateutil import parser as dateutil_parser

from ..constants import EPOCH, MICROSECONDS_PER_MILLISECOND
from .invalid_datetime import INVALID_DATETIME, InvalidDatetime
from .iso_formatter import to_utc

logger = logging.getLogger(__name__)


def truncate_to_millis(dt: datetime) -> datetime:
    """Drop sub-millisecond precision from a datetime."""
    micros = dt.microsecond - dt.microsecond % MICROSECONDS_PER_MILLISECOND
    return dt.replace(microsecond=micros)


def parse_iso_utc(value: object) -> datetime | InvalidDatetime:
    """
    Parse an ISO-8601 string into an aware UTC datetime at millisecond precision.

    Strings without an offset are read as UTC.

    Args:
        value: ISO-8601 date or date-time string

    Returns:
        Aware UTC datetime, or INVALID_DATETIME when value does not parse
    """
    if not isinstance(value, str):
        logger.debug("Non-string timestamp %r decoded as invalid date", value)
        return INVALID_DATETIME

    try:
        dt = dateutil_parser.isoparse(value.strip())
        return truncate_to_millis(to_utc(dt))
    except (ValueError, OverflowError) as exc:
        logger.debug("Timestamp %r decoded as invalid date: %s", value, exc)
        return INVALID_DATETIME


def millis_to_utc(millis: int | float) -> datetime | InvalidDatetime:
    """Convert epoch milliseconds to an aware UTC datetime, truncating fractions."""
    try:
        numeric = float(millis)
        if not math.isfinite(numeric):
            return INVALID_DATETIME
        return EPOCH + timedelta(milliseconds=math.trunc(millis))
    except OverflowError:
        logger.debug("Epoch milliseconds %r outside datetime range", millis)
        return INVALID_DATETIME


def utc_to_millis(dt: datetime) -> int:
    """Return the epoch millisecond value of a datetime, reading naive values as UTC."""
    if dt.utcoffset() is None:
        dt = dt.replace(tzinfo=timezone.utc)
    # aware subtraction applies the offset without leaving the datetime range
    delta = dt - EPOCH
    return delta // timedelta(milliseconds=1)


__all__ = ["millis_to_utc", "parse_iso_utc", "truncate_to_millis", "utc_to_millis"]
