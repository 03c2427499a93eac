"""Gregorian calendar math.

Pure functions with no state: leap-year test, days in a year or month,
and integer clamping. Everything else in Almanac builds on these.

Examples:
    >>> is_leap_year(2024)
    True
    >>> days_in(2024)
    366
    >>> days_in(2023, 2)
    28
    >>> clamp(15, 1, 12)
    12
"""

from __future__ import annotations

from almanac._internal.constants import DAYS_IN_MONTH
from almanac.errors import ValidationError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12). Normalize out-of-range months first.

    Returns:
        Number of days in the month.

    Raises:
        ValidationError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in(year: int, month: int | None = None) -> int:
    """Return the number of days in a year, or in a month of that year.

    Args:
        year: The year.
        month: Optional month (1-12). When given, the month length is
            returned instead of the year length.

    Returns:
        Days in the year (365/366) or in the month (28-31).

    Examples:
        >>> days_in(2000, 2)
        29
        >>> days_in(1900, 2)
        28
    """
    if month is None:
        return days_in_year(year)
    return days_in_month(year, month)


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Return value bounded to the inclusive range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


__all__ = [
    "is_leap_year",
    "days_in",
    "days_in_year",
    "days_in_month",
    "clamp",
]
