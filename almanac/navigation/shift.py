"""Calendar shifting of Instants by year, month and day offsets.

Clamping behavior:
    Year and month offsets are applied first and the day saturates at the
    end of the resulting month. A day offset is then applied as whole days,
    carrying across month and year boundaries.

Examples:
    2024-01-31 add_month()      -> 2024-02-29  # leap year
    2023-01-31 add_month()      -> 2023-02-28
    2024-02-29 add_year()       -> 2025-02-28
    2024-01-31 add_year(0, 1, 1) -> 2024-03-01

The time of day, nanoseconds and timezone are preserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac._internal.validation import validate_arity
from almanac.navigation.normalize import normalize

if TYPE_CHECKING:
    from almanac.core.instant import Instant


def add_year(t: Instant, *ymd: int) -> Instant:
    """Add years, and optionally months and days, to an Instant.

    Args:
        t: The Instant to shift.
        *ymd: Up to three offsets (years, months, days). With none, one
            year is added.

    Returns:
        A new Instant with the same time of day and timezone.

    Raises:
        TypeError: If more than three offsets are given.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> t = Instant(2024, 2, 29, 12, timezone=Timezone.utc())
        >>> t.add_year().date()
        (2025, 2, 28)
        >>> t.add_year(0, -13).date()
        (2023, 1, 29)
    """
    from almanac.core.instant import Instant

    validate_arity("add_year", ymd, 3)
    years, months, days = ymd + (1, 0, 0)[len(ymd):]

    year, month, day = normalize(t.year + years, t.month + months, t.day)
    return Instant._compose(year, month, day, t.nanos_of_day, t.timezone, day_offset=days)


def add_month(t: Instant, *md: int) -> Instant:
    """Add months, and optionally days, to an Instant; one month by default."""
    validate_arity("add_month", md, 2)
    if len(md) < 2:
        return add_year(t, 0, md[0] if md else 1)
    return add_year(t, 0, md[0], md[1])


def add_day(t: Instant, d: int = 1) -> Instant:
    """Add whole calendar days to an Instant; one day by default."""
    return add_year(t, 0, 0, d)


__all__ = [
    "add_year",
    "add_month",
    "add_day",
]
