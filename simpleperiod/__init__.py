"""SimplePeriod - date range value object

Public API for building, converting, stepping through and describing periods
of time.

Usage:
    from simpleperiod import Period

    # Explicit dates (text or datetime)
    period = Period.create("2025-01-06", "2025-01-12 23:59:59")

    # Relative to now: from 2 hours ago until 1 hour from now
    period = Period.hours(2, 1)

    # Every 15 minutes across the period
    for instant in period.period_by_step(15, "minutes"):
        ...

    # Human readable length
    period.diff_as_string()  # Returns: '3 hours'
"""

__version__ = "0.1.0"

# ============================================================================
# Period API
# ============================================================================

from .period import (
    Period,               # Date range value object
    TimeUnit,             # Units for relative factories and stepping
    DateSteps,            # Lazy stepping sequence
    parse_date,           # Date text -> datetime
    interval_to_string,   # relativedelta -> display string
)

# ============================================================================
# Clock
# ============================================================================

from .period import (
    set_clock,            # Install a current-instant provider
    reset_clock,          # Restore the system clock
)

# ============================================================================
# Errors
# ============================================================================

from .period import (
    PeriodError,
    InvalidPeriodError,
    InvalidArgumentError,
)

__all__ = [
    "Period",
    "TimeUnit",
    "DateSteps",
    "parse_date",
    "interval_to_string",
    "set_clock",
    "reset_clock",
    "PeriodError",
    "InvalidPeriodError",
    "InvalidArgumentError",
]
