"""
WireTimestamp dataclass for transmitting points in time.

The wire form is a JSON object with a single ``timestamp`` string holding an
ISO-8601 date-time in UTC with millisecond precision, for example
``{"timestamp": "2024-01-01T12:34:56.789Z"}``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

import orjson

from .constants import TIMESTAMP_FIELD
from .conversion_helpers import InvalidDatetime, format_iso_utc, parse_iso_utc
from .exceptions import WireFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WireTimestamp:
    """String-based representation of a point in time"""

    timestamp: str  # ISO-8601, e.g. '2024-01-01T00:00:00.000Z'

    @classmethod
    def from_datetime(cls, value: datetime | InvalidDatetime) -> WireTimestamp:
        """Encode a native datetime; raises InvalidDateError for INVALID_DATETIME."""
        return cls(timestamp=format_iso_utc(value))

    def to_datetime(self) -> datetime | InvalidDatetime:
        """Decode to a native datetime, INVALID_DATETIME when the string does not parse."""
        return parse_iso_utc(self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire payload"""
        return {TIMESTAMP_FIELD: self.timestamp}

    @classmethod
    def from_dict(cls, payload: Any) -> WireTimestamp:
        """
        Create from a wire payload.

        Raises:
            WireFormatError: If payload is not a mapping with a string timestamp
        """
        if not isinstance(payload, Mapping) or TIMESTAMP_FIELD not in payload:
            logger.debug("Rejected wire payload without timestamp: %r", payload)
            raise WireFormatError.missing_field(payload, TIMESTAMP_FIELD)
        value = payload[TIMESTAMP_FIELD]
        if not isinstance(value, str):
            logger.debug("Rejected wire payload with non-string timestamp: %r", payload)
            raise WireFormatError.non_string_field(payload, TIMESTAMP_FIELD)
        return cls(timestamp=value)

    def to_json(self) -> str:
        """Convert to JSON string"""
        return orjson.dumps(self.to_dict()).decode()

    @classmethod
    def from_json(cls, data: str | bytes) -> WireTimestamp:
        """Create from JSON string"""
        try:
            payload = orjson.loads(data)
        except orjson.JSONDecodeError as exc:
            logger.debug("Rejected malformed wire JSON: %r", data)
            raise WireFormatError(f"Invalid wire JSON: {exc}", payload=data) from exc
        return cls.from_dict(payload)


__all__ = ["WireTimestamp"]
