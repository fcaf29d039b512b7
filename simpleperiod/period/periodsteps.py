"""Stepping through a period at a regular interval.

DateSteps behaves like a date-period generator: it is lazy, finite and can
be iterated any number of times. The start is always produced, instants
strictly before the end are produced, and the end itself only when
`include_end` is set and a step lands on it exactly.

Each point is computed from the start (start + k * step) rather than from
the previous point, so stepping by months from Jan 31 gives Feb 28, Mar 31,
Apr 30 instead of drifting to the 28th.

Seconds, minutes and hours on timezone-aware datetimes are stepped on the
UTC timeline, so a period crossing a DST change gets evenly spaced instants
that all exist. Days and larger units keep wall-clock arithmetic (midnight
stays midnight).
"""

from datetime import datetime, timezone
from typing import Iterator

from simpleperiod.period.periodexceptions import InvalidArgumentError
from simpleperiod.period.periodunits import TimeUnit


class DateSteps:
    """
    Instants from `start` towards `end`, `interval` units of `unit` apart.

    Args:
        start: First instant
        end: Bound of the sequence
        interval: Positive number of units per step
        unit: TimeUnit or unit name
        include_end: Also produce `end` when a step hits it exactly

    Examples:
        >>> steps = DateSteps(datetime(2025, 1, 1), datetime(2025, 1, 1, 0, 15), 5, "minutes")
        >>> [d.minute for d in steps]
        [0, 5, 10]
    """

    def __init__(
        self,
        start: datetime,
        end: datetime,
        interval: int,
        unit: "str | TimeUnit",
        *,
        include_end: bool = False,
    ):
        if isinstance(interval, bool) or not isinstance(interval, int):
            raise InvalidArgumentError(f"Step interval must be an integer, got {interval!r}")
        if interval <= 0:
            raise InvalidArgumentError(f"Step interval must be positive, got {interval}")

        self._start = start
        self._end = end
        self._interval = interval
        self._unit = TimeUnit.from_text(unit)
        self._include_end = include_end

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def unit(self) -> TimeUnit:
        return self._unit

    @property
    def include_end(self) -> bool:
        return self._include_end

    def __iter__(self) -> Iterator[datetime]:
        start = self._start
        end = self._end
        absolute = self._unit.is_fixed_length and start.tzinfo is not None
        if absolute:
            start = start.astimezone(timezone.utc)
            end = end.astimezone(timezone.utc)

        k = 0
        while True:
            current = start + self._unit.delta(k * self._interval)
            if current > end:
                return
            if current == end and not self._include_end:
                return
            yield current.astimezone(self._start.tzinfo) if absolute else current
            k += 1

    def __repr__(self) -> str:
        return (
            f"DateSteps(start={self._start.isoformat()}, end={self._end.isoformat()}, "
            f"interval={self._interval}, unit={self._unit.value!r}, include_end={self._include_end})"
        )


__all__ = [
    "DateSteps",
]
