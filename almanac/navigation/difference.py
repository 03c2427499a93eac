"""Differences between two Instants in calendar and clock units.

Clock units (day, hour, minute, second) are exact: the Duration between
the two Instants expressed in that unit, days being hours / 24. Calendar
units are fractional:

    MONTH   whole months between the dates, minus one if the day of month
            has not been reached yet, plus the leftover days as a fraction
            of the earlier operand's (b's) month length.
    YEAR    the year difference plus each operand's position within its
            own year (day of year / days in year).

An unknown unit yields 0.0 rather than an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from almanac.units.unit import Unit

if TYPE_CHECKING:
    from almanac.core.instant import Instant

logger = logging.getLogger(__name__)


def _diff_months(a: Instant, b: Instant) -> float:
    a_year, a_month, a_day = a.date()
    b_year, b_month, b_day = b.date()

    months = (a_year - b_year) * 12 + (a_month - b_month)
    days = a_day - b_day
    if days < 0:
        months -= 1
    return months + days / b.month_days


def _diff_years(a: Instant, b: Instant) -> float:
    return (a.year - b.year) + a.year_day / a.days - b.year_day / b.days


def diff_in(a: Instant, b: Instant, unit: Unit | str) -> float:
    """Return a - b measured in unit.

    Args:
        a: The minuend.
        b: The subtrahend; its month length scales MONTH fractions.
        unit: A Unit or its tag ("y", "M", "d", "h", "m", "s").

    Returns:
        The signed difference, or 0.0 for an unrecognized unit.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> utc = Timezone.utc()
        >>> a = Instant(2024, 3, 15, timezone=utc)
        >>> b = Instant(2024, 1, 15, timezone=utc)
        >>> diff_in(a, b, "M")
        2.0
        >>> diff_in(a, b, "d")
        60.0
        >>> diff_in(a, b, "w")
        0.0
    """
    resolved = Unit.from_tag(unit)
    if resolved is None:
        logger.debug("unknown difference unit %r, returning 0", unit)
        return 0.0
    if resolved is Unit.YEAR:
        return _diff_years(a, b)
    if resolved is Unit.MONTH:
        return _diff_months(a, b)
    delta = a - b
    if resolved is Unit.DAY:
        return delta.hours / 24
    return delta.total_nanoseconds / resolved.nanoseconds


def diff_abs_in(a: Instant, b: Instant, unit: Unit | str) -> float:
    """Return abs(diff_in(a, b, unit))."""
    return abs(diff_in(a, b, unit))


__all__ = [
    "diff_in",
    "diff_abs_in",
]
