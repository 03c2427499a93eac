"""Conversion between Instants and standard library datetimes.

Database drivers hand timestamps back and forth as ``datetime.datetime``
values, so this is the storage boundary for Instants. The zero Instant
maps to ``None`` (SQL NULL) and back.

Standard library datetimes carry microseconds, so nanoseconds are
truncated on the way out.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING

from almanac._internal.constants import NANOS_PER_MICROSECOND
from almanac.config import resolve_timezone
from almanac.errors import ValidationError
from almanac.units.timezone import Timezone

if TYPE_CHECKING:
    from almanac.config import Config
    from almanac.core.instant import Instant


def to_py(t: Instant) -> _datetime.datetime | None:
    """Return an aware datetime with t's offset, or None for the zero Instant.

    Raises:
        ValidationError: If t's year is outside the datetime range 1-9999.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> to_py(Instant(2024, 1, 15, 12, timezone=Timezone.from_hours(8)))
        datetime.datetime(2024, 1, 15, 12, 0, tzinfo=datetime.timezone(datetime.timedelta(seconds=28800)))
        >>> to_py(Instant.zero()) is None
        True
    """
    if t.is_zero:
        return None

    year, month, day = t.date()
    if not _datetime.MINYEAR <= year <= _datetime.MAXYEAR:
        raise ValidationError(f"year {year} is outside the datetime range")

    tzinfo = _datetime.timezone(_datetime.timedelta(seconds=t.timezone.offset_seconds))
    return _datetime.datetime(
        year,
        month,
        day,
        t.hour,
        t.minute,
        t.second,
        t.nanosecond // NANOS_PER_MICROSECOND,
        tzinfo=tzinfo,
    )


def from_py(
    value: _datetime.datetime | _datetime.date | None,
    *,
    config: Config | None = None,
) -> Instant:
    """Create an Instant from a datetime, a date, or None.

    Aware datetimes keep their UTC offset; naive datetimes and dates are
    read in the configured default timezone. None gives the zero Instant.

    Raises:
        TypeError: If value is of any other type.
        TimezoneError: If an aware datetime's UTC offset exceeds +/-14 hours
            (the standard library allows up to +/-23:59).
    """
    from almanac.core.instant import Instant

    if value is None:
        return Instant.zero()

    if isinstance(value, _datetime.datetime):
        offset = value.utcoffset()
        if offset is None:
            timezone = resolve_timezone(None, config)
        else:
            timezone = Timezone(int(offset.total_seconds()))
        return Instant(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            nanosecond=value.microsecond * NANOS_PER_MICROSECOND,
            timezone=timezone,
        )

    if isinstance(value, _datetime.date):
        return Instant(value.year, value.month, value.day, timezone=resolve_timezone(None, config))

    raise TypeError(f"expected datetime, date or None, got {type(value).__name__}")


__all__ = [
    "to_py",
    "from_py",
]
