"""Shared test fixtures for simpleperiod tests."""

import pytest
from datetime import datetime, timezone

from simpleperiod.period.periodclock import reset_clock, set_clock
from simpleperiod.period.periodconfig import OUTPUT_FORMAT_ENV, TIMEZONE_ENV


# Reference instant with a sub-second component, so truncation is observable
ASOF = datetime(2025, 10, 2, 12, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test with the package defaults, whatever the shell exports."""
    monkeypatch.delenv(TIMEZONE_ENV, raising=False)
    monkeypatch.delenv(OUTPUT_FORMAT_ENV, raising=False)


@pytest.fixture
def asof():
    """Reference instant for tests passing asof_ts explicitly."""
    return ASOF


@pytest.fixture
def frozen_clock():
    """Pin the package clock to ASOF for the duration of a test.

    Example:
        def test_last_day(frozen_clock):
            period = Period.days(1)
            assert period.end_date == frozen_clock.replace(microsecond=0)
    """
    set_clock(lambda: ASOF)
    yield ASOF
    reset_clock()


@pytest.fixture
def utc_dates():
    """Factory for UTC datetimes: utc_dates(2025, 1, 1, 10) -> aware datetime."""
    def make(*args):
        return datetime(*args, tzinfo=timezone.utc)
    return make
