"""Almanac: calendar navigation and interval arithmetic.

Almanac layers calendar-relative operations ("add one month", "start of
this week", "months between two instants") over a timezone-aware,
nanosecond-precision Instant. Month overflow carries into the year and
the day saturates at the end of the month: January 31 plus one month is
the last day of February.

Core Types:
    Instant: Timezone-aware point in time with nanosecond precision
    Duration: Exact signed span of time

Units:
    Timezone: Fixed UTC offset timezone
    Unit: Difference granularity (YEAR, MONTH, DAY, HOUR, MINUTE, SECOND)

Calendar Math:
    is_leap_year, days_in, days_in_year, days_in_month, clamp

Configuration:
    Config: Default timezone for construction, read from ALMANAC_TIMEZONE

Exceptions:
    AlmanacError: Base exception
    ValidationError: Invalid component values
    ParseError: Failed to parse text
    TimezoneError: Invalid timezone

Example:
    >>> from almanac import Instant, Timezone
    >>> t = Instant(2024, 1, 31, 9, 30, timezone=Timezone.utc())
    >>> t.add_month().date()
    (2024, 2, 29)
    >>> t.end_week().date()
    (2024, 2, 4)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Calendar math
from almanac.calendar import clamp, days_in, days_in_month, days_in_year, is_leap_year

# Configuration
from almanac.config import Config, default_config

# Core types
from almanac.core.duration import Duration
from almanac.core.instant import Instant, since, until

# Units
from almanac.units.timezone import Timezone
from almanac.units.unit import Unit

# Exceptions
from almanac.errors import (
    AlmanacError,
    ParseError,
    TimezoneError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Calendar math
    "is_leap_year",
    "days_in",
    "days_in_year",
    "days_in_month",
    "clamp",
    # Configuration
    "Config",
    "default_config",
    # Core types
    "Instant",
    "Duration",
    "since",
    "until",
    # Units
    "Timezone",
    "Unit",
    # Exceptions
    "AlmanacError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
]
