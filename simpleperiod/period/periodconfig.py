"""Package defaults with environment overrides.

Values are read at call time so tests and applications can change the
environment without reloading the module.

Environment:
    SIMPLEPERIOD_TIMEZONE: Default timezone label (default: "UTC")
    SIMPLEPERIOD_OUTPUT_FORMAT: strftime pattern for str(period)
        (default: "%Y-%m-%d %H:%M:%S")
"""

import os

DEFAULT_TIMEZONE = "UTC"
DEFAULT_OUTPUT_FORMAT = "%Y-%m-%d %H:%M:%S"

TIMEZONE_ENV = "SIMPLEPERIOD_TIMEZONE"
OUTPUT_FORMAT_ENV = "SIMPLEPERIOD_OUTPUT_FORMAT"


def get_default_timezone() -> str:
    """Return the default timezone label."""
    return os.environ.get(TIMEZONE_ENV) or DEFAULT_TIMEZONE


def get_default_output_format() -> str:
    """Return the default strftime pattern used to render periods."""
    return os.environ.get(OUTPUT_FORMAT_ENV) or DEFAULT_OUTPUT_FORMAT


__all__ = [
    "DEFAULT_TIMEZONE",
    "DEFAULT_OUTPUT_FORMAT",
    "get_default_timezone",
    "get_default_output_format",
]
