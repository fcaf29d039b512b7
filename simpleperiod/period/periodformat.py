"""Human-readable rendering of calendar differences."""

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from simpleperiod.period.periodexceptions import InvalidArgumentError

# Largest first
_UNIT_LABELS = (
    ("years", "year"),
    ("months", "month"),
    ("days", "day"),
    ("hours", "hour"),
    ("minutes", "minute"),
    ("seconds", "second"),
)


def _pluralize(quantity: int, singular: str) -> str:
    return f"{quantity} {singular}" if quantity == 1 else f"{quantity} {singular}s"


def interval_to_string(delta: relativedelta, granularity: int = 2) -> str:
    """
    Render a calendar difference using its largest non-zero units.

    Sub-second components are ignored. A negative difference (end before
    start) is rendered with a leading "-".

    Args:
        delta: Normalized relativedelta, e.g. relativedelta(end, start)
        granularity: Maximum number of units to show

    Returns:
        Display string

    Examples:
        >>> interval_to_string(relativedelta(hours=1, minutes=30))
        '1 hour, 30 minutes'

        >>> interval_to_string(relativedelta(years=2, days=3, seconds=4))
        '2 years, 3 days'

        >>> interval_to_string(relativedelta(days=1), granularity=3)
        '1 day'

        >>> interval_to_string(relativedelta())
        '0 seconds'
    """
    if granularity < 1:
        raise InvalidArgumentError(f"Granularity must be at least 1, got {granularity}")

    delta = delta.normalized()
    values = [(getattr(delta, attr), label) for attr, label in _UNIT_LABELS]

    negative = any(value < 0 for value, _ in values)
    parts = [
        _pluralize(abs(int(value)), label)
        for value, label in values
        if value
    ][:granularity]

    if not parts:
        return "0 seconds"

    text = ", ".join(parts)
    return f"-{text}" if negative else text


__all__ = [
    "interval_to_string",
]
