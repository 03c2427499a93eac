"""Day-number conversions for Almanac.

Instants store their date as a Modified Julian Day (MJD) number so that
day shifts are plain integer addition. This module converts between MJD
numbers and (year, month, day) triples in the proleptic Gregorian calendar.

MJD 0 = 1858-11-17 (a Wednesday).

This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import DAYS_BEFORE_MONTH
from almanac.calendar import days_in_month, is_leap_year

# Days in a full 400/100/4/1 year Gregorian cycle
_DAYS_PER_400Y = 146097
_DAYS_PER_100Y = 36524
_DAYS_PER_4Y = 1461


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year for a valid date."""
    result = DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert a valid date to an ordinal where 0001-01-01 is 1.

    Floor division keeps the formula valid for year 0 and negative years.
    """
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + day_of_year(year, month, day)


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal (0001-01-01 is 1) back to (year, month, day)."""
    # divmod floors, so negative ordinals land in an earlier 400-year cycle
    n400, n = divmod(ordinal - 1, _DAYS_PER_400Y)
    n100, n = divmod(n, _DAYS_PER_100Y)
    n4, n = divmod(n, _DAYS_PER_4Y)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    if n1 == 4 or n100 == 4:
        # Last day of a leap year closing a 4- or 400-year cycle
        return year - 1, 12, 31

    doy = n + 1
    month = 1
    while doy > days_in_month(year, month):
        doy -= days_in_month(year, month)
        month += 1
    return year, month, doy


_MJD_EPOCH_ORDINAL = ymd_to_ordinal(1858, 11, 17)


def ymd_to_mjd(year: int, month: int, day: int) -> int:
    """Convert a valid date to its Modified Julian Day number."""
    return ymd_to_ordinal(year, month, day) - _MJD_EPOCH_ORDINAL


def mjd_to_ymd(mjd: int) -> tuple[int, int, int]:
    """Convert a Modified Julian Day number to (year, month, day)."""
    return ordinal_to_ymd(mjd + _MJD_EPOCH_ORDINAL)


def mjd_to_weekday(mjd: int) -> int:
    """Return the weekday of an MJD number, 0=Sunday through 6=Saturday."""
    return (mjd + 3) % 7


def mjd_to_iso_weekday(mjd: int) -> int:
    """Return the ISO weekday of an MJD number, 1=Monday through 7=Sunday."""
    return (mjd + 2) % 7 + 1


__all__ = [
    "day_of_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_mjd",
    "mjd_to_ymd",
    "mjd_to_weekday",
    "mjd_to_iso_weekday",
]
