"""Internal constants for Almanac.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Last representable nanosecond of a day, 23:59:59.999999999
END_OF_DAY_NANOS: int = NANOS_PER_DAY - 1

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Cumulative days before each month in a non-leap year, 1-indexed
DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# MJD 0 = 1858-11-17 00:00 UTC
MJD_UNIX_EPOCH: int = 40587  # 1970-01-01 00:00 UTC

# Integers with at most this many digits are read as Unix seconds
UNIX_SECONDS_MAX: int = 9_999_999_999

# Timezone offset limit (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR

# Environment variable naming the default timezone offset
TIMEZONE_ENV_VAR: str = "ALMANAC_TIMEZONE"


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "END_OF_DAY_NANOS",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "MJD_UNIX_EPOCH",
    "UNIX_SECONDS_MAX",
    "MAX_UTC_OFFSET_SECONDS",
    "TIMEZONE_ENV_VAR",
]
