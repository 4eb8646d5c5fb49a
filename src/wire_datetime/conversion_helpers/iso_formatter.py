"""UTC millisecond ISO-8601 formatting."""

from datetime import datetime, timezone

from ..constants import ISO_TIMESPEC, UTC_DESIGNATOR
from ..exceptions import InvalidDateError
from .invalid_datetime import InvalidDatetime


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming naive values are already UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_iso_utc(value: object) -> str:
    """
    Format a native date-time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Args:
        value: Datetime to format; naive values are read as UTC

    Returns:
        ISO-8601 string in UTC with millisecond precision

    Raises:
        InvalidDateError: If value is the invalid date sentinel
        TypeError: If value is not a datetime
    """
    if isinstance(value, InvalidDatetime):
        raise InvalidDateError(value=value)
    if not isinstance(value, datetime):
        raise TypeError(f"Unsupported datetime value type: {type(value)!r}")

    try:
        utc_value = to_utc(value)
    except OverflowError as exc:
        raise InvalidDateError(f"Date is out of range: {value!r}", value=value) from exc
    # isoformat keeps the zero-padded four digit year that strftime("%Y") drops
    naive_utc = utc_value.replace(tzinfo=None)
    return naive_utc.isoformat(timespec=ISO_TIMESPEC) + UTC_DESIGNATOR


__all__ = ["format_iso_utc", "to_utc"]
