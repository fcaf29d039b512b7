"""Period
------

A period of time between two datetimes.

Key Behaviors:
  1. Construction enforces start_date <= end_date (InvalidPeriodError)
  2. Relative factories (minutes, hours, days, weeks, months, years) are
     anchored to "now" truncated to whole seconds, so calls within the same
     second build identical periods
  3. to_timezone() REINTERPRETS the stored wall-clock time in tz_in before
     converting to tz_out; it is not a plain zone conversion
  4. limit_start_date()/limit_end_date() mutate in place without re-checking
     the ordering invariant (a warning is logged when it breaks)
"""

import logging
from datetime import datetime, timedelta
from typing import Iterator, Optional
from zoneinfo import ZoneInfo

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from simpleperiod.period import periodclock
from simpleperiod.period.periodconfig import get_default_output_format, get_default_timezone
from simpleperiod.period.periodexceptions import InvalidArgumentError, InvalidPeriodError
from simpleperiod.period.periodformat import interval_to_string
from simpleperiod.period.periodnormalize import parse_date
from simpleperiod.period.periodsteps import DateSteps
from simpleperiod.period.periodunits import TimeUnit, shift

logger = logging.getLogger(__name__)


def _check_instant(value, name: str) -> None:
    if not isinstance(value, datetime):
        raise InvalidArgumentError(f"{name} must be a datetime, got {type(value).__name__}")


def _check_comparable(value: datetime, reference: datetime, name: str) -> None:
    _check_instant(value, name)
    if (value.tzinfo is None) != (reference.tzinfo is None):
        raise InvalidArgumentError(
            f"{name} must be timezone-aware if and only if the period's dates are"
        )


def _is_naive_datetime(value) -> bool:
    return isinstance(value, datetime) and value.tzinfo is None


def _to_naive(dt: datetime, zone: ZoneInfo) -> datetime:
    # Wall-clock time in `zone`, without tzinfo
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(zone).replace(tzinfo=None)


def _reinterpret(dt: datetime, zone_in: ZoneInfo, zone_out: ZoneInfo) -> datetime:
    # Wall-clock reading at second precision; the current offset is discarded
    wall_clock = dt.replace(tzinfo=None, microsecond=0)
    return wall_clock.replace(tzinfo=zone_in).astimezone(zone_out)


class Period:
    """
    A period of time between two datetimes.

    Attributes:
        start_date: Start of the period
        end_date: End of the period
        timezone: Informational timezone label (default: configured, "UTC")
        output_format: strftime pattern used by str(period)

    Examples:
        >>> p = Period(datetime(2025, 1, 1, 10, 0), datetime(2025, 1, 1, 11, 30))
        >>> str(p)
        'From: 2025-01-01 10:00:00, To: 2025-01-01 11:30:00'
        >>> p.diff_as_string()
        '1 hour, 30 minutes'
    """

    def __init__(self, start_date: datetime, end_date: datetime):
        """
        Args:
            start_date: Start of the period
            end_date: End of the period

        Raises:
            InvalidArgumentError: If either value is not a datetime, or one is
                timezone-aware and the other naive
            InvalidPeriodError: If start_date is after end_date
        """
        _check_instant(start_date, "start_date")
        _check_instant(end_date, "end_date")
        if (start_date.tzinfo is None) != (end_date.tzinfo is None):
            raise InvalidArgumentError(
                "start_date and end_date must both be timezone-aware or both be naive"
            )

        if start_date > end_date:
            raise InvalidPeriodError.start_date_cannot_be_after_end_date(start_date, end_date)

        self.start_date = start_date
        self.end_date = end_date
        self.timezone = get_default_timezone()
        self.output_format = get_default_output_format()

    # ---- Factories ----

    @classmethod
    def create(
        cls,
        start_date: "str | datetime",
        end_date: "str | datetime | None" = None,
        *,
        asof_ts: Optional[datetime] = None,
        tz: Optional[str] = None,
    ) -> "Period":
        """
        Create a Period from text or datetimes.

        When either argument is a naive datetime, dates built here (parsed
        text and the default "now") are made naive too: they are converted
        to `tz` (default: configured timezone) and their tzinfo dropped, so
        both ends can be compared.

        Args:
            start_date: Date text (e.g., "2025-01-06", "-2 days") or datetime
            end_date: Date text or datetime; now (truncated to seconds) if omitted
            asof_ts: Reference instant for "now" and relative text
            tz: Zone for naive parsed text and the period's timezone label

        Returns:
            Period

        Examples:
            >>> Period.create("2025-01-06", "2025-01-12 23:59:59")
            Period(start_date=2025-01-06T00:00:00+00:00, end_date=2025-01-12T23:59:59+00:00, timezone='UTC')

            >>> Period.create(datetime(2025, 1, 6), "2025-01-07 12:00").end_date
            datetime.datetime(2025, 1, 7, 12, 0)
        """
        naive = _is_naive_datetime(start_date) or _is_naive_datetime(end_date)
        zone = ZoneInfo(tz or get_default_timezone())

        if isinstance(start_date, str):
            start_date = parse_date(start_date, asof_ts=asof_ts, tz=tz)
            if naive:
                start_date = _to_naive(start_date, zone)

        if not end_date:
            end_date = periodclock.now(asof_ts)
            if naive:
                end_date = _to_naive(end_date, zone)
        elif isinstance(end_date, str):
            end_date = parse_date(end_date, asof_ts=asof_ts, tz=tz)
            if naive:
                end_date = _to_naive(end_date, zone)

        period = cls(start_date, end_date)
        if tz:
            period.timezone = tz
        return period

    @classmethod
    def relative(
        cls,
        unit: "str | TimeUnit",
        start_offset: int,
        end_offset: int = 0,
        *,
        asof_ts: Optional[datetime] = None,
    ) -> "Period":
        """
        Create a Period measured in `unit` from now.

        start_date = now - start_offset units
        end_date = now + end_offset units (now when end_offset is 0)

        Args:
            unit: TimeUnit or unit name
            start_offset: Units before now at which the period starts
            end_offset: Units after now at which the period ends
            asof_ts: Reference instant (default: clock provider)

        Returns:
            Period

        Raises:
            InvalidPeriodError: If the offsets put the start after the end
        """
        unit = TimeUnit.from_text(unit)
        reference = periodclock.now(asof_ts)

        end_date = shift(reference, end_offset, unit) if end_offset else reference
        start_date = shift(reference, -start_offset, unit)

        logger.debug(
            f"Relative period -{start_offset}/+{end_offset} {unit.value} "
            f"from {reference.isoformat()}"
        )
        return cls(start_date, end_date)

    @classmethod
    def minutes(cls, start_offset: int, end_offset: int = 0, *, asof_ts: Optional[datetime] = None) -> "Period":
        """Period from `start_offset` minutes ago to `end_offset` minutes from now."""
        return cls.relative(TimeUnit.MINUTES, start_offset, end_offset, asof_ts=asof_ts)

    @classmethod
    def hours(cls, start_offset: int, end_offset: int = 0, *, asof_ts: Optional[datetime] = None) -> "Period":
        """Period from `start_offset` hours ago to `end_offset` hours from now."""
        return cls.relative(TimeUnit.HOURS, start_offset, end_offset, asof_ts=asof_ts)

    @classmethod
    def days(cls, start_offset: int, end_offset: int = 0, *, asof_ts: Optional[datetime] = None) -> "Period":
        """Period from `start_offset` days ago to `end_offset` days from now."""
        return cls.relative(TimeUnit.DAYS, start_offset, end_offset, asof_ts=asof_ts)

    @classmethod
    def weeks(cls, start_offset: int, end_offset: int = 0, *, asof_ts: Optional[datetime] = None) -> "Period":
        """Period from `start_offset` weeks ago to `end_offset` weeks from now."""
        return cls.relative(TimeUnit.WEEKS, start_offset, end_offset, asof_ts=asof_ts)

    @classmethod
    def months(cls, start_offset: int, end_offset: int = 0, *, asof_ts: Optional[datetime] = None) -> "Period":
        """Period from `start_offset` months ago to `end_offset` months from now."""
        return cls.relative(TimeUnit.MONTHS, start_offset, end_offset, asof_ts=asof_ts)

    @classmethod
    def years(cls, start_offset: int, end_offset: int = 0, *, asof_ts: Optional[datetime] = None) -> "Period":
        """Period from `start_offset` years ago to `end_offset` years from now."""
        return cls.relative(TimeUnit.YEARS, start_offset, end_offset, asof_ts=asof_ts)

    # ---- Timezones ----

    def to_timezone(self, tz_out: str, tz_in: str = "UTC") -> "Period":
        """
        Reinterpret both dates as wall-clock times in `tz_in`, then convert
        them to `tz_out`.

        This is NOT a plain conversion. Whatever offset a date currently
        carries is discarded: "2025-01-01 00:00:00+09:00" with tz_in="UTC"
        is read as midnight UTC. Sub-second precision is dropped. Wall-clock
        times that do not exist or are ambiguous in `tz_in` (DST transitions)
        resolve the way zoneinfo does (fold=0).

        Args:
            tz_out: IANA zone of the resulting dates
            tz_in: IANA zone the stored wall-clock times are read in

        Returns:
            self, for chaining

        Raises:
            zoneinfo.ZoneInfoNotFoundError: If a zone name is unknown

        Examples:
            >>> p = Period(datetime(2024, 1, 1), datetime(2024, 1, 2))
            >>> p.to_timezone("America/New_York").start_date.isoformat()
            '2023-12-31T19:00:00-05:00'
        """
        zone_in = ZoneInfo(tz_in)
        zone_out = ZoneInfo(tz_out)

        self.start_date = _reinterpret(self.start_date, zone_in, zone_out)
        self.end_date = _reinterpret(self.end_date, zone_in, zone_out)

        logger.debug(f"Reinterpreted period from {tz_in} into {tz_out}")
        return self

    def convert_to_timezone(self, tz_in: str, tz_out: str = "UTC") -> "Period":
        """Same as to_timezone() with the arguments swapped."""
        return self.to_timezone(tz_out, tz_in)

    # ---- Stepping ----

    def period_by_step(
        self,
        interval: int,
        scale: "str | TimeUnit",
        *,
        include_end: bool = False,
    ) -> DateSteps:
        """
        Instants from start_date towards end_date every `interval` `scale`.

        Args:
            interval: Positive number of units per step
            scale: TimeUnit or unit name ("seconds", "minutes", "days", ...)
            include_end: Also produce end_date when a step hits it exactly

        Returns:
            DateSteps (lazy, can be iterated repeatedly)

        Examples:
            >>> p = Period(datetime(2025, 1, 1), datetime(2025, 1, 1, 0, 15))
            >>> [d.strftime("%H:%M") for d in p.period_by_step(5, "minutes")]
            ['00:00', '00:05', '00:10']
        """
        return DateSteps(
            self.start_date,
            self.end_date,
            interval,
            scale,
            include_end=include_end,
        )

    def period_by_steps(self, steps: int, *, include_end: bool = False) -> DateSteps:
        """
        Split the period into `steps` equal steps of whole seconds.

        The step size is the span in seconds divided by `steps`, rounded up
        (at least one second). For uneven spans the rounding can produce one
        point fewer than `steps`.

        Args:
            steps: Number of steps, positive
            include_end: Also produce end_date when a step hits it exactly

        Returns:
            DateSteps

        Raises:
            InvalidArgumentError: If steps is not a positive integer
        """
        if isinstance(steps, bool) or not isinstance(steps, int):
            raise InvalidArgumentError(f"Number of steps must be an integer, got {steps!r}")
        if steps <= 0:
            raise InvalidArgumentError(f"Number of steps must be positive, got {steps}")

        span = int(self.end_date.timestamp()) - int(self.start_date.timestamp())
        interval = max(1, -(-span // steps))

        logger.debug(f"Splitting {span}s into {steps} steps of {interval}s")
        return self.period_by_step(interval, TimeUnit.SECONDS, include_end=include_end)

    # ---- Clamping ----

    def limit_start_date(self, limit: datetime) -> "Period":
        """
        Move start_date forward to `limit` if `limit` is later.

        The ordering invariant is not re-checked: a limit after end_date
        leaves the period inverted.

        Returns:
            self, for chaining
        """
        _check_comparable(limit, self.start_date, "limit")
        if limit > self.start_date:
            self.start_date = limit
            self._warn_if_inverted()
        return self

    def limit_end_date(self, limit: datetime) -> "Period":
        """
        Move end_date back to `limit` if `limit` is earlier.

        The ordering invariant is not re-checked: a limit before start_date
        leaves the period inverted.

        Returns:
            self, for chaining
        """
        _check_comparable(limit, self.end_date, "limit")
        if limit < self.end_date:
            self.end_date = limit
            self._warn_if_inverted()
        return self

    def _warn_if_inverted(self) -> None:
        if self.start_date > self.end_date:
            logger.warning(
                f"Period is inverted after clamping: start {self.start_date.isoformat()} "
                f"is after end {self.end_date.isoformat()}"
            )

    # ---- Views ----

    def diff(self) -> relativedelta:
        """Calendar difference from start_date to end_date."""
        return relativedelta(self.end_date, self.start_date)

    def diff_as_string(self, granularity: int = 2) -> str:
        """Difference rendered with its largest non-zero units, e.g. '2 days, 3 hours'."""
        return interval_to_string(self.diff(), granularity=granularity)

    @property
    def duration(self) -> timedelta:
        return self.end_date - self.start_date

    def contains(self, instant: datetime) -> bool:
        """True if `instant` lies within the period, bounds included."""
        _check_comparable(instant, self.start_date, "instant")
        return self.start_date <= instant <= self.end_date

    def to_array(self) -> list:
        """[start_date, end_date] (the stored objects, not copies)."""
        return [self.start_date, self.end_date]

    def __iter__(self) -> Iterator[datetime]:
        return iter((self.start_date, self.end_date))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.start_date == other.start_date and self.end_date == other.end_date

    __hash__ = None

    def __str__(self) -> str:
        return (
            f"From: {self.start_date.strftime(self.output_format)}, "
            f"To: {self.end_date.strftime(self.output_format)}"
        )

    def __repr__(self) -> str:
        return (
            f"Period(start_date={self.start_date.isoformat()}, "
            f"end_date={self.end_date.isoformat()}, timezone={self.timezone!r})"
        )


__all__ = [
    "Period",
]
