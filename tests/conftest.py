"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest


@pytest.fixture
def new_year_utc() -> datetime:
    """2024-01-01T00:00:00Z as an aware UTC datetime."""
    return datetime(2024, 1, 1, tzinfo=timezone.utc)
