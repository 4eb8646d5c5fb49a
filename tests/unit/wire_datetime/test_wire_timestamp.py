"""Tests for wire_datetime.wire_timestamp module."""

from datetime import datetime
from types import MappingProxyType

import orjson
import pytest

from wire_datetime.conversion_helpers import INVALID_DATETIME
from wire_datetime.exceptions import InvalidDateError, WireFormatError
from wire_datetime.wire_timestamp import WireTimestamp


class TestWireTimestampCodec:
    """Tests for WireTimestamp dict and JSON conversion."""

    def test_to_dict(self) -> None:
        """Test payload holds only the timestamp field."""
        wire = WireTimestamp(timestamp="2024-01-01T12:34:56.789Z")
        assert wire.to_dict() == {"timestamp": "2024-01-01T12:34:56.789Z"}

    def test_to_json(self) -> None:
        """Test JSON output is a single-field object."""
        wire = WireTimestamp(timestamp="2024-01-01T12:34:56.789Z")
        assert orjson.loads(wire.to_json()) == {"timestamp": "2024-01-01T12:34:56.789Z"}

    def test_from_json_str_and_bytes(self) -> None:
        """Test from_json accepts str and bytes."""
        expected = WireTimestamp(timestamp="1970-01-01T00:00:00.000Z")
        assert WireTimestamp.from_json('{"timestamp": "1970-01-01T00:00:00.000Z"}') == expected
        assert WireTimestamp.from_json(b'{"timestamp": "1970-01-01T00:00:00.000Z"}') == expected

    def test_from_dict_keeps_unparseable_string(self) -> None:
        """Test the record does not validate the timestamp string."""
        wire = WireTimestamp.from_dict({"timestamp": "not-a-date"})
        assert wire.timestamp == "not-a-date"
        assert wire.to_datetime() is INVALID_DATETIME

    def test_from_dict_accepts_any_mapping(self) -> None:
        """Test read-only mappings are accepted like dicts."""
        payload = MappingProxyType({"timestamp": "2024-01-01T00:00:00.000Z"})
        assert WireTimestamp.from_dict(payload) == WireTimestamp(timestamp="2024-01-01T00:00:00.000Z")

    def test_from_dict_missing_field(self) -> None:
        """Test missing timestamp raises WireFormatError."""
        with pytest.raises(WireFormatError, match="missing 'timestamp'"):
            WireTimestamp.from_dict({"time": "2024-01-01T00:00:00.000Z"})

    def test_from_dict_non_string_field(self) -> None:
        """Test non-string timestamp raises WireFormatError."""
        with pytest.raises(WireFormatError, match="must be a string") as exc_info:
            WireTimestamp.from_dict({"timestamp": 1704067200000})
        assert exc_info.value.payload == {"timestamp": 1704067200000}

    def test_from_json_malformed(self) -> None:
        """Test malformed JSON raises WireFormatError."""
        with pytest.raises(WireFormatError, match="Invalid wire JSON"):
            WireTimestamp.from_json("{timestamp:")

    def test_from_json_non_object(self) -> None:
        """Test a JSON array is rejected."""
        with pytest.raises(WireFormatError):
            WireTimestamp.from_json('["2024-01-01T00:00:00.000Z"]')

    def test_is_frozen(self) -> None:
        """Test WireTimestamp cannot be mutated."""
        wire = WireTimestamp(timestamp="1970-01-01T00:00:00.000Z")
        with pytest.raises(AttributeError):
            wire.timestamp = "2024-01-01T00:00:00.000Z"  # type: ignore[misc]


class TestWireTimestampDatetime:
    """Tests for WireTimestamp.from_datetime and to_datetime."""

    def test_from_datetime(self, new_year_utc: datetime) -> None:
        """Test encoding a datetime."""
        wire = WireTimestamp.from_datetime(new_year_utc)
        assert wire.timestamp == "2024-01-01T00:00:00.000Z"

    def test_from_datetime_invalid(self) -> None:
        """Test encoding the invalid date raises."""
        with pytest.raises(InvalidDateError):
            WireTimestamp.from_datetime(INVALID_DATETIME)

    def test_to_datetime(self, new_year_utc: datetime) -> None:
        """Test decoding to a datetime."""
        wire = WireTimestamp(timestamp="2024-01-01T00:00:00.000Z")
        assert wire.to_datetime() == new_year_utc
