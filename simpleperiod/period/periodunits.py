"""Time Units
----------

Closed set of units a Period can be built from or stepped by, and the
calendar arithmetic for them.

Arithmetic is delegated to dateutil's relativedelta, so month and year
shifts clamp to the end of the month instead of overflowing:

  >>> shift(datetime(2025, 3, 31), -1, TimeUnit.MONTHS)
  datetime.datetime(2025, 2, 28, 0, 0)
"""

from datetime import datetime
from enum import Enum

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from simpleperiod.period.periodexceptions import InvalidArgumentError


class TimeUnit(str, Enum):
    """A unit of time. The value is the matching relativedelta keyword."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def from_text(cls, text: "str | TimeUnit") -> "TimeUnit":
        """
        Resolve a unit name to a TimeUnit.

        Accepts plural, singular and common short forms, case-insensitive.

        Args:
            text: Unit name (e.g., "minutes", "Minute", "min") or a TimeUnit

        Returns:
            TimeUnit

        Raises:
            InvalidArgumentError: If the name is not a known unit

        Examples:
            >>> TimeUnit.from_text("month")
            <TimeUnit.MONTHS: 'months'>

            >>> TimeUnit.from_text("hrs")
            <TimeUnit.HOURS: 'hours'>
        """
        if isinstance(text, TimeUnit):
            return text
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Unit must be text or TimeUnit, got {type(text).__name__}")

        key = text.strip().lower()
        unit = _UNIT_ALIASES.get(key)
        if unit is None:
            raise InvalidArgumentError(f"Unknown time unit: {text!r}")
        return unit

    @property
    def is_fixed_length(self) -> bool:
        """True for units that are always the same number of seconds long."""
        return self in (TimeUnit.SECONDS, TimeUnit.MINUTES, TimeUnit.HOURS)

    def delta(self, quantity: int) -> relativedelta:
        """Return a relativedelta of `quantity` units."""
        return relativedelta(**{self.value: quantity})


_UNIT_ALIASES = {
    "s": TimeUnit.SECONDS,
    "sec": TimeUnit.SECONDS,
    "secs": TimeUnit.SECONDS,
    "second": TimeUnit.SECONDS,
    "seconds": TimeUnit.SECONDS,
    "min": TimeUnit.MINUTES,
    "mins": TimeUnit.MINUTES,
    "minute": TimeUnit.MINUTES,
    "minutes": TimeUnit.MINUTES,
    "h": TimeUnit.HOURS,
    "hr": TimeUnit.HOURS,
    "hrs": TimeUnit.HOURS,
    "hour": TimeUnit.HOURS,
    "hours": TimeUnit.HOURS,
    "d": TimeUnit.DAYS,
    "day": TimeUnit.DAYS,
    "days": TimeUnit.DAYS,
    "w": TimeUnit.WEEKS,
    "wk": TimeUnit.WEEKS,
    "wks": TimeUnit.WEEKS,
    "week": TimeUnit.WEEKS,
    "weeks": TimeUnit.WEEKS,
    "mo": TimeUnit.MONTHS,
    "month": TimeUnit.MONTHS,
    "months": TimeUnit.MONTHS,
    "y": TimeUnit.YEARS,
    "yr": TimeUnit.YEARS,
    "yrs": TimeUnit.YEARS,
    "year": TimeUnit.YEARS,
    "years": TimeUnit.YEARS,
}


def is_unit_name(text: str) -> bool:
    """Return True if text names a known time unit."""
    return text.strip().lower() in _UNIT_ALIASES


def shift(dt: datetime, quantity: int, unit: "str | TimeUnit") -> datetime:
    """
    Move a datetime by a signed quantity of a unit.

    Args:
        dt: Datetime to shift (not modified)
        quantity: Signed number of units
        unit: TimeUnit or unit name

    Returns:
        New datetime
    """
    return dt + TimeUnit.from_text(unit).delta(quantity)


__all__ = [
    "TimeUnit",
    "is_unit_name",
    "shift",
]
