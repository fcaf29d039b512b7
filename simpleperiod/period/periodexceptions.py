"""Errors raised by the period package."""

from datetime import datetime


class PeriodError(Exception):
    """Base class for all simpleperiod errors."""


class InvalidPeriodError(PeriodError, ValueError):
    """Raised when a period would start after it ends.

    Attributes:
        start_date: The offending start instant
        end_date: The offending end instant
    """

    def __init__(self, start_date: datetime, end_date: datetime, message: str | None = None):
        self.start_date = start_date
        self.end_date = end_date
        if message is None:
            message = (
                f"Start date {start_date.isoformat()} cannot be after "
                f"end date {end_date.isoformat()}"
            )
        super().__init__(message)

    @classmethod
    def start_date_cannot_be_after_end_date(cls, start_date: datetime, end_date: datetime) -> "InvalidPeriodError":
        return cls(start_date, end_date)


class InvalidArgumentError(PeriodError, ValueError):
    """Raised when a value is outside the domain a helper accepts."""


__all__ = [
    "PeriodError",
    "InvalidPeriodError",
    "InvalidArgumentError",
]
