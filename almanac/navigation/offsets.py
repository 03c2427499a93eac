"""Signed month/day selection within a target year.

Positive selectors count forward from the start of the period, negative
ones backward from its end: month -1 is December, day 0 is the last day
of the month and day -1 the day before it. Out-of-range selectors
saturate at the period bounds.

The time of day, nanoseconds and timezone of the input are preserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac.calendar import days_in_month

if TYPE_CHECKING:
    from almanac.core.instant import Instant


def resolve_month(current: int, m: int) -> int:
    """Resolve a signed month selector; 0 keeps the current month.

    Examples:
        >>> resolve_month(5, -1)
        12
        >>> resolve_month(5, 0)
        5
        >>> resolve_month(5, 20)
        12
    """
    if m > 0:
        return min(m, 12)
    if m < 0:
        return max(13 + m, 1)
    return current


def resolve_day(max_day: int, d: int) -> int:
    """Resolve a signed day selector against a month of max_day days.

    Examples:
        >>> resolve_day(31, 0)
        31
        >>> resolve_day(31, -1)
        30
        >>> resolve_day(30, 31)
        30
    """
    if d > 0:
        return min(d, max_day)
    return max(max_day + d, 1)


def go(t: Instant, years: int, month: int | None = None, day: int | None = None) -> Instant:
    """Jump by years and optionally select a month and a day.

    Without a month selector the current month is kept; without a day
    selector the current day is kept, clamped to the target month.

    Args:
        t: The starting Instant.
        years: Years to add (may be negative).
        month: Signed month selector.
        day: Signed day selector.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> t = Instant(2024, 5, 15, 8, 0, timezone=Timezone.utc())
        >>> t.go(0, -1, -1).date()
        (2024, 12, 30)
        >>> t.go(1, 2).date()
        (2025, 2, 15)
    """
    from almanac.core.instant import Instant

    year = t.year + years
    target_month = t.month if month is None else resolve_month(t.month, month)
    target_day = t.day if day is None else day
    target_day = resolve_day(days_in_month(year, target_month), target_day)
    return Instant._compose(year, target_month, target_day, t.nanos_of_day, t.timezone)


def go_year(t: Instant, year: int, month: int | None = None, day: int | None = None) -> Instant:
    """Like go(), but with an absolute target year."""
    return go(t, year - t.year, month, day)


def go_month(t: Instant, month: int, day: int = 0) -> Instant:
    """Select a month, and a day in it, within the current year.

    The default day 0 selects the last day of the month.
    """
    return go(t, 0, month, day)


def go_day(t: Instant, day: int) -> Instant:
    """Select a day within the current month."""
    return go(t, 0, 0, day)


__all__ = [
    "resolve_month",
    "resolve_day",
    "go",
    "go_year",
    "go_month",
    "go_day",
]
