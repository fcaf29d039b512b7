"""Date Text Normalization and Parsing
------------------------------------

Turns date-ish text into datetimes for Period.create().

Supports:
  - Keywords: "now", "today", "yesterday", "tomorrow"
  - Signed offsets from now: "+3 days", "-2 weeks", "1 month ago"
  - Anything dateutil can parse: "2025-01-06", "2025-01-06 10:30:00+02:00",
    "Jan 6 2025 10:30"

Naive results are placed in the default timezone.

Examples:
  >>> normalize_date_text("  Today ")
  'today'

  >>> normalize_date_text("- 2  Days")
  '-2 days'
"""

import logging
import re
import unicodedata
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

try:
    from dateutil import parser as dateutil_parser
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from simpleperiod.period.periodclock import now
from simpleperiod.period.periodconfig import get_default_timezone
from simpleperiod.period.periodexceptions import InvalidArgumentError
from simpleperiod.period.periodunits import TimeUnit, is_unit_name, shift

logger = logging.getLogger(__name__)

_KEYWORD_DAY_OFFSETS = {
    "today": 0,
    "yesterday": -1,
    "tomorrow": 1,
}

_RELATIVE_OFFSET = re.compile(r"^([+-])?(\d+) ?([a-z]+)(?: (ago))?$")


def normalize_date_text(text: str) -> str:
    """
    Normalize date text for consistent parsing.

    Transformations:
      - Strip whitespace
      - Lowercase
      - Normalize Unicode (NFC)
      - Normalize dashes (—, –, − → -)
      - Remove spaces after a leading sign ("- 2 days" → "-2 days")
      - Collapse repeated whitespace

    Args:
        text: Raw date text

    Returns:
        Normalized text
    """
    if not text:
        return ""

    text = text.strip().lower()
    text = unicodedata.normalize("NFC", text)

    # em dash, en dash, minus sign, figure dash
    for dash in ("—", "–", "−", "‒"):
        text = text.replace(dash, "-")

    text = re.sub(r"^([+-])\s+", r"\1", text)
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def is_relative_date(text: str) -> bool:
    """
    Check whether normalized text is relative to the current instant.

    Examples:
        >>> is_relative_date("yesterday")
        True

        >>> is_relative_date("+3 days")
        True

        >>> is_relative_date("2025-01-06")
        False
    """
    if text == "now" or text in _KEYWORD_DAY_OFFSETS:
        return True

    match = _RELATIVE_OFFSET.match(text)
    return bool(match and is_unit_name(match.group(3)))


def _resolve_relative(text: str, reference: datetime) -> datetime:
    if text == "now":
        return reference

    if text in _KEYWORD_DAY_OFFSETS:
        midnight = reference.replace(hour=0, minute=0, second=0, microsecond=0)
        return shift(midnight, _KEYWORD_DAY_OFFSETS[text], TimeUnit.DAYS)

    sign, quantity, unit, ago = _RELATIVE_OFFSET.match(text).groups()
    quantity = int(quantity)
    if (sign == "-") != bool(ago):
        quantity = -quantity
    return shift(reference, quantity, unit)


def parse_date(
    text: str,
    *,
    asof_ts: Optional[datetime] = None,
    tz: Optional[str] = None,
) -> datetime:
    """
    Parse date text to a datetime.

    Args:
        text: Date text (see module docstring for accepted forms)
        asof_ts: Reference instant for relative text and for date fields the
            text leaves out (default: clock provider)
        tz: Zone attached to naive results (default: configured timezone)

    Returns:
        Datetime. Relative text keeps the reference's timezone; parsed text
        keeps its explicit offset or gets `tz`.

    Raises:
        InvalidArgumentError: If the text is empty or cannot be parsed
        zoneinfo.ZoneInfoNotFoundError: If `tz` is not a known zone

    Examples:
        >>> asof = datetime(2025, 10, 2, 12, 0, tzinfo=timezone.utc)
        >>> parse_date("yesterday", asof_ts=asof)
        datetime.datetime(2025, 10, 1, 0, 0, tzinfo=datetime.timezone.utc)

        >>> parse_date("2 hours ago", asof_ts=asof)
        datetime.datetime(2025, 10, 2, 10, 0, tzinfo=datetime.timezone.utc)
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(f"Date text must be a string, got {type(text).__name__}")

    text_norm = normalize_date_text(text)
    if not text_norm:
        raise InvalidArgumentError("Date text is empty")

    reference = now(asof_ts)

    if is_relative_date(text_norm):
        result = _resolve_relative(text_norm, reference)
        logger.debug(f"Resolved relative date {text!r} to {result.isoformat()}")
        return result

    # Fields missing from the text (e.g. the date in "10:30") come from the reference day
    default = reference.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    try:
        result = dateutil_parser.parse(text.strip(), default=default)
    except (ValueError, OverflowError) as e:
        raise InvalidArgumentError(f"Could not parse date text {text!r}: {e}") from e

    if result.tzinfo is None:
        result = result.replace(tzinfo=ZoneInfo(tz or get_default_timezone()))

    return result


__all__ = [
    "normalize_date_text",
    "is_relative_date",
    "parse_date",
]
