"""Tests for time units and diff rendering.

Run with: pytest tests/test_periodformat.py -v
"""

import pytest
from datetime import datetime

from dateutil.relativedelta import relativedelta

from simpleperiod.period.periodexceptions import InvalidArgumentError
from simpleperiod.period.periodformat import interval_to_string
from simpleperiod.period.periodunits import TimeUnit, is_unit_name, shift


# ============================================================================
# Time Units
# ============================================================================

class TestTimeUnit:
    """Test unit resolution and arithmetic"""

    @pytest.mark.parametrize("text,expected", [
        ("minutes", TimeUnit.MINUTES),
        ("Minute", TimeUnit.MINUTES),
        ("min", TimeUnit.MINUTES),
        ("hrs", TimeUnit.HOURS),
        ("day", TimeUnit.DAYS),
        ("weeks", TimeUnit.WEEKS),
        ("month", TimeUnit.MONTHS),
        (" years ", TimeUnit.YEARS),
        ("seconds", TimeUnit.SECONDS),
    ])
    def test_from_text(self, text, expected):
        assert TimeUnit.from_text(text) is expected

    def test_from_text_passthrough(self):
        assert TimeUnit.from_text(TimeUnit.DAYS) is TimeUnit.DAYS

    def test_from_text_unknown(self):
        with pytest.raises(InvalidArgumentError):
            TimeUnit.from_text("fortnight")

    def test_from_text_non_string(self):
        with pytest.raises(InvalidArgumentError):
            TimeUnit.from_text(5)

    def test_is_unit_name(self):
        assert is_unit_name("Weeks")
        assert not is_unit_name("dec")

    def test_weekday_abbreviation_is_not_a_unit(self):
        """Test "mon" (Monday) is not read as months"""
        assert not is_unit_name("mon")
        with pytest.raises(InvalidArgumentError):
            TimeUnit.from_text("mon")

    def test_is_fixed_length(self):
        assert TimeUnit.HOURS.is_fixed_length
        assert TimeUnit.SECONDS.is_fixed_length
        assert not TimeUnit.DAYS.is_fixed_length
        assert not TimeUnit.MONTHS.is_fixed_length

    def test_delta(self):
        assert TimeUnit.WEEKS.delta(2) == relativedelta(days=14)
        assert TimeUnit.MONTHS.delta(-1) == relativedelta(months=-1)

    def test_shift_month_end(self):
        """Test month shifts clamp to the last day of the month"""
        assert shift(datetime(2025, 3, 31), -1, "months") == datetime(2025, 2, 28)
        assert shift(datetime(2024, 1, 31), 1, TimeUnit.MONTHS) == datetime(2024, 2, 29)


# ============================================================================
# Diff Rendering
# ============================================================================

class TestIntervalToString:
    """Test largest-unit rendering of a relativedelta"""

    def test_hours_and_minutes(self):
        assert interval_to_string(relativedelta(hours=1, minutes=30)) == "1 hour, 30 minutes"

    def test_skips_zero_units(self):
        assert interval_to_string(relativedelta(years=2, days=3, seconds=4)) == "2 years, 3 days"

    def test_singular(self):
        assert interval_to_string(relativedelta(days=1), granularity=3) == "1 day"

    def test_granularity(self):
        delta = relativedelta(years=1, months=2, days=3, hours=4)
        assert interval_to_string(delta, granularity=1) == "1 year"
        assert interval_to_string(delta, granularity=4) == "1 year, 2 months, 3 days, 4 hours"

    def test_zero(self):
        assert interval_to_string(relativedelta()) == "0 seconds"

    def test_sub_second_only_is_zero(self):
        assert interval_to_string(relativedelta(microseconds=500)) == "0 seconds"

    def test_negative(self):
        assert interval_to_string(relativedelta(hours=-2, minutes=-5)) == "-2 hours, 5 minutes"

    def test_from_datetimes(self):
        """Test a relativedelta computed from two datetimes"""
        delta = relativedelta(datetime(2025, 1, 1, 11, 30), datetime(2025, 1, 1, 10, 0))
        assert interval_to_string(delta) == "1 hour, 30 minutes"

    def test_invalid_granularity(self):
        with pytest.raises(InvalidArgumentError):
            interval_to_string(relativedelta(hours=1), granularity=0)
