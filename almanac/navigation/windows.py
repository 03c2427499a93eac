"""Start and end boundaries of calendar periods.

start() returns the first nanosecond (00:00:00.000000000) and end() the
last nanosecond (23:59:59.999999999) of a day picked by up to three
offsets. The number of offsets given selects the period:

    start()           Jan 1 of the current year
    start(y)          Jan 1 of the year y years away
    start(y, m)       the 1st of the month y years and m months away
    start(y, m, d)    the current day advanced by y years, m months, d days

    end()             the current day
    end(y)            the same month and day, y years away
    end(y, m)         the same day, y years and m months away
    end(y, m, d)      the current day advanced by y years, m months, d days

Month offsets carry into years. The day, after its offset is added, is
clamped to the target month (and to the 1st from below) instead of rolling
over. Week boundaries use Monday as the first day of the week and do move
across months.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac._internal.constants import END_OF_DAY_NANOS
from almanac._internal.validation import validate_arity
from almanac.navigation.normalize import normalize

if TYPE_CHECKING:
    from almanac.core.instant import Instant


def start(t: Instant, *ymd: int) -> Instant:
    """Return the start of the period selected by up to three offsets.

    Raises:
        TypeError: If more than three offsets are given.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> t = Instant(2024, 1, 31, 15, 45, timezone=Timezone.utc())
        >>> t.start().date()
        (2024, 1, 1)
        >>> t.start(0, 1).date()
        (2024, 2, 1)
        >>> t.start(0, 1, 0).date()
        (2024, 2, 29)
        >>> t.start(0, 0, 5).date()
        (2024, 1, 31)
    """
    from almanac.core.instant import Instant

    validate_arity("start", ymd, 3)
    if len(ymd) == 0:
        year, month, day = t.year, 1, 1
    elif len(ymd) == 1:
        year, month, day = t.year + ymd[0], 1, 1
    elif len(ymd) == 2:
        year, month, day = normalize(t.year + ymd[0], t.month + ymd[1], 1)
    else:
        year, month, day = normalize(t.year + ymd[0], t.month + ymd[1], t.day + ymd[2])

    return Instant._compose(year, month, day, 0, t.timezone)


def end(t: Instant, *ymd: int) -> Instant:
    """Return the end of the day selected by up to three offsets.

    Fields not covered by an offset keep their current values.

    Raises:
        TypeError: If more than three offsets are given.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> t = Instant(2024, 2, 29, 8, timezone=Timezone.utc())
        >>> t.end()
        Instant(2024, 2, 29, 23, 59, 59, nanosecond=999999999, timezone=UTC)
        >>> t.end(1).date()
        (2025, 2, 28)
    """
    from almanac.core.instant import Instant

    validate_arity("end", ymd, 3)
    offsets = ymd + (0, 0, 0)[len(ymd):]
    year, month, day = normalize(t.year + offsets[0], t.month + offsets[1], t.day + offsets[2])
    return Instant._compose(year, month, day, END_OF_DAY_NANOS, t.timezone)


def start_month(t: Instant, month: int = 0, day: int = 0) -> Instant:
    """Return start(t, 0, month, day)."""
    return start(t, 0, month, day)


def start_day(t: Instant, day: int = 0) -> Instant:
    """Return start(t, 0, 0, day), staying within the current month."""
    return start(t, 0, 0, day)


def end_month(t: Instant, month: int = 0, day: int = 0) -> Instant:
    """Return end(t, 0, month, day)."""
    return end(t, 0, month, day)


def end_day(t: Instant, day: int = 0) -> Instant:
    """Return end(t, 0, 0, day), staying within the current month."""
    return end(t, 0, 0, day)


def start_week(t: Instant, n: int = 0) -> Instant:
    """Return Monday 00:00 of the week n weeks away from t's week.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> sunday = Instant(2024, 3, 3, 18, timezone=Timezone.utc())
        >>> sunday.start_week().date()
        (2024, 2, 26)
        >>> sunday.start_week(1).date()
        (2024, 3, 4)
    """
    from almanac.core.instant import Instant

    year, month, day = t.date()
    offset = 1 - t.iso_weekday + n * 7
    return Instant._compose(year, month, day, 0, t.timezone, day_offset=offset)


def end_week(t: Instant, n: int = 0) -> Instant:
    """Return Sunday 23:59:59.999999999 of the week n weeks away from t's week."""
    from almanac.core.instant import Instant

    year, month, day = t.date()
    offset = 7 - t.iso_weekday + n * 7
    return Instant._compose(year, month, day, END_OF_DAY_NANOS, t.timezone, day_offset=offset)


__all__ = [
    "start",
    "end",
    "start_month",
    "start_day",
    "end_month",
    "end_day",
    "start_week",
    "end_week",
]
