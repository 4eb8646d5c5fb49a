"""Wire timestamp format constants.

These constants define the canonical string form used for every timestamp
written to the wire: ISO-8601, UTC, millisecond precision, ``Z`` designator.
"""

from datetime import datetime, timezone

# Format constants
UTC_DESIGNATOR = "Z"
ISO_TIMESPEC = "milliseconds"

# Precision
MICROSECONDS_PER_MILLISECOND = 1000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Wire payload
TIMESTAMP_FIELD = "timestamp"

__all__ = [
    "UTC_DESIGNATOR",
    "ISO_TIMESPEC",
    "MICROSECONDS_PER_MILLISECOND",
    "EPOCH",
    "TIMESTAMP_FIELD",
]
