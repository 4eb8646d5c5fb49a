"""Exception classes for wire timestamp conversion.

Exception classes support two patterns:
1. No-argument raise: raise InvalidDateError()
2. Contextual attributes: err = InvalidDateError(value="not-a-date"); raise err
"""

from typing import Any


class WireDatetimeError(Exception):
    """Base exception for all wire timestamp errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Wire timestamp error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class InvalidDateError(WireDatetimeError, ValueError):
    """Invalid date value cannot be stringified."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Invalid time value"
        super().__init__(message, **kwargs)

    @classmethod
    def expected_datetime_string(cls, value: Any) -> "InvalidDateError":
        """Create error for a string that does not parse as a date-time."""
        return cls(f"Expected datetime string, received {value!r}", value=value)


class WireFormatError(WireDatetimeError, ValueError):
    """Wire payload is not a timestamp object."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Wire payload is not a timestamp object"
        super().__init__(message, **kwargs)

    @classmethod
    def missing_field(cls, payload: Any, field: str) -> "WireFormatError":
        """Create error for a payload without the timestamp field."""
        return cls(f"Wire payload is missing '{field}': {payload!r}", payload=payload)

    @classmethod
    def non_string_field(cls, payload: Any, field: str) -> "WireFormatError":
        """Create error for a timestamp field that is not a string."""
        return cls(f"Wire payload field '{field}' must be a string: {payload!r}", payload=payload)


__all__ = ["WireDatetimeError", "InvalidDateError", "WireFormatError"]
