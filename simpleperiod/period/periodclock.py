"""Current-instant provider.

Every "now" the package computes goes through the provider installed here,
so tests and applications can pin time without patching datetime:

  >>> set_clock(lambda: datetime(2025, 10, 2, 12, 30, 15, 500, tzinfo=timezone.utc))
  >>> now()
  datetime.datetime(2025, 10, 2, 12, 30, 15, tzinfo=datetime.timezone.utc)
  >>> reset_clock()
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current UTC instant from the system clock."""
    return datetime.now(timezone.utc)


_clock: Clock = system_clock


def set_clock(clock: Clock) -> None:
    """Install a new current-instant provider."""
    global _clock
    if not callable(clock):
        raise TypeError(f"clock must be callable, got {type(clock).__name__}")
    _clock = clock
    logger.debug(f"Installed clock provider {clock!r}")


def reset_clock() -> None:
    """Restore the system clock."""
    set_clock(system_clock)


def get_clock() -> Clock:
    return _clock


def truncate_to_second(dt: datetime) -> datetime:
    """Zero the sub-second component of a datetime."""
    return dt.replace(microsecond=0)


def now(asof_ts: Optional[datetime] = None) -> datetime:
    """
    Current instant with whole-second precision.

    Args:
        asof_ts: Explicit reference instant; the clock provider is used when None

    Returns:
        Datetime with microsecond == 0
    """
    if asof_ts is None:
        asof_ts = _clock()
    return truncate_to_second(asof_ts)


__all__ = [
    "Clock",
    "system_clock",
    "set_clock",
    "reset_clock",
    "get_clock",
    "truncate_to_second",
    "now",
]
