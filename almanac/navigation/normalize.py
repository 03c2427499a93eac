"""Calendar component normalization.

Turns a (year, month, day) triple whose month has been pushed outside
1-12 by an offset into a valid date. Months carry into years; the day
saturates at the end of the resulting month instead of rolling over, so
January 31 plus one month is the last day of February.
"""

from __future__ import annotations

from almanac.calendar import clamp, days_in_month


def normalize(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Carry an out-of-range month into the year and clamp the day.

    Args:
        year: The year.
        month: A 1-based month that may be <= 0 or > 12.
        day: A day that may exceed the resulting month's length or fall
            below 1; it is clamped into 1..days_in_month.

    Returns:
        (year, month, day) with month in 1-12 and day in 1..days_in_month.

    Examples:
        >>> normalize(2024, 14, 31)
        (2025, 2, 28)
        >>> normalize(2024, 0, 15)
        (2023, 12, 15)
        >>> normalize(2024, -11, 31)
        (2023, 1, 31)
        >>> normalize(2024, 3, -5)
        (2024, 3, 1)
    """
    carry, month_index = divmod(month - 1, 12)
    year += carry
    month = month_index + 1
    return year, month, clamp(day, 1, days_in_month(year, month))


__all__ = ["normalize"]
