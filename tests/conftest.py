"""Shared test fixtures for internettime tests."""

from __future__ import annotations

from typing import Any

import pytest

from internettime import TemporalValue, TimezoneOffset


@pytest.fixture
def utc() -> TimezoneOffset:
    """Zero offset, as parsed from ``Z``."""
    return TimezoneOffset.UTC


@pytest.fixture
def plus_two() -> TimezoneOffset:
    """Offset parsed from ``+02:00``."""
    return TimezoneOffset.of_hours_minutes(2, 0)


@pytest.fixture
def sample_values(plus_two: TimezoneOffset) -> dict[str, TemporalValue]:
    """One value per factory, as a parser would produce them."""
    return {
        "year": TemporalValue.from_year(2021),
        "year_month": TemporalValue.from_year_month(2021, 3),
        "date": TemporalValue.from_date(2021, 3, 5),
        "minute": TemporalValue.from_date_time_minute(2021, 3, 5, 10, 20, plus_two),
        "second": TemporalValue.from_date_time_full(2021, 3, 5, 10, 20, 30, 123_456_789, plus_two),
        "second_local": TemporalValue.from_date_time_full(2021, 3, 5, 10, 20, 30),
    }


# Test markers for different test types
def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, pure values)"
    )
    config.addinivalue_line(
        "markers", "property: mark test as a hypothesis property test"
    )
