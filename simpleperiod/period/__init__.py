"""Period module: a date range value object.

Public API:
    Period(start_date, end_date)
        Period between two datetimes (start must not be after end)

    Period.create(start, end=None) / Period.days(3) / Period.months(1, 1) ...
        Factories from text, datetimes or offsets from now

    TimeUnit
        Units accepted by the relative factories and by period_by_step()

    set_clock(provider) / reset_clock()
        Swap the current-instant provider used for "now"

Examples:
    >>> from simpleperiod.period import Period
    >>> from datetime import datetime, timezone
    >>>
    >>> # Last three days, pinned to a reference instant
    >>> asof = datetime(2025, 10, 2, 12, 30, 15, 999, tzinfo=timezone.utc)
    >>> Period.days(3, asof_ts=asof).to_array()
    [datetime(2025, 9, 29, 12, 30, 15, tzinfo=UTC), datetime(2025, 10, 2, 12, 30, 15, tzinfo=UTC)]
    >>>
    >>> # Split into four steps
    >>> p = Period.create("2025-01-01 00:00", "2025-01-01 01:00")
    >>> [d.strftime("%H:%M") for d in p.period_by_steps(4)]
    ['00:00', '00:15', '00:30', '00:45']
    >>>
    >>> # Read stored wall-clock times as Paris time, convert to UTC
    >>> p.convert_to_timezone("Europe/Paris").start_date.isoformat()
    '2024-12-31T23:00:00+00:00'
"""

from simpleperiod.period.periodcore import Period
from simpleperiod.period.periodclock import (
    set_clock,
    reset_clock,
    get_clock,
    system_clock,
    truncate_to_second,
)
from simpleperiod.period.periodexceptions import (
    PeriodError,
    InvalidPeriodError,
    InvalidArgumentError,
)
from simpleperiod.period.periodformat import interval_to_string
from simpleperiod.period.periodnormalize import parse_date
from simpleperiod.period.periodsteps import DateSteps
from simpleperiod.period.periodunits import TimeUnit

__all__ = [
    "Period",
    "TimeUnit",
    "DateSteps",
    "parse_date",
    "interval_to_string",
    "set_clock",
    "reset_clock",
    "get_clock",
    "system_clock",
    "truncate_to_second",
    "PeriodError",
    "InvalidPeriodError",
    "InvalidArgumentError",
]
