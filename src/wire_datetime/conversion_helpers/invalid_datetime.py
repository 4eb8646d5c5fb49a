"""Invalid date sentinel returned by lenient decoding."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any


class InvalidDatetime:
    """
    Native date-time value that does not represent a point in time.

    Decoding an unparseable wire timestamp yields this value instead of raising.
    Its clock value is NaN, mirroring a date built from unparseable input.
    Only one instance exists: ``INVALID_DATETIME``.
    """

    _instance: InvalidDatetime | None = None

    def __new__(cls) -> InvalidDatetime:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def timestamp(self) -> float:
        """Return the clock value, always NaN."""
        return math.nan

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "INVALID_DATETIME"

    def __reduce__(self) -> str:
        return "INVALID_DATETIME"


INVALID_DATETIME = InvalidDatetime()


def is_valid_datetime(value: Any) -> bool:
    """Return True when ``value`` is a native datetime rather than the invalid sentinel."""
    return isinstance(value, datetime)


__all__ = ["InvalidDatetime", "INVALID_DATETIME", "is_valid_datetime"]
