"""Instant class: a timezone-aware point in time.

An Instant pairs a calendar date and a time of day with a fixed-offset
Timezone, at nanosecond resolution. It is immutable; every operation
returns a new Instant.

Internally the local date is a Modified Julian Day number and the local
time of day is nanoseconds since midnight, so shifting by whole days or
by a Duration is integer arithmetic.

The calendar navigation methods (add_month, start_week, diff_in, ...)
delegate to the functions in :mod:`almanac.navigation`.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from almanac._internal.constants import (
    MJD_UNIX_EPOCH,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from almanac._internal.ordinal import (
    day_of_year,
    mjd_to_iso_weekday,
    mjd_to_weekday,
    mjd_to_ymd,
    ymd_to_mjd,
)
from almanac._internal.validation import validate_date, validate_range, validate_year
from almanac.calendar import days_in_month, days_in_year
from almanac.config import resolve_timezone
from almanac.core.duration import Duration
from almanac.units.timezone import Timezone

if TYPE_CHECKING:
    from almanac.config import Config
    from almanac.units.unit import Unit

# Unix epoch and the 0001-01-01 origin used by round() and truncate(),
# both as nanoseconds since MJD 0 UTC
_UNIX_EPOCH_NANOS = MJD_UNIX_EPOCH * NANOS_PER_DAY
_ZERO_EPOCH_NANOS = ymd_to_mjd(1, 1, 1) * NANOS_PER_DAY


class Instant:
    """A point in time with nanosecond precision and a UTC offset.

    Two Instants are equal when they denote the same point on the
    timeline, even if their timezones differ.

    Attributes:
        year: The year (can be zero or negative).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nanosecond: Nanoseconds within the second.
        timezone: The fixed-offset Timezone.

    Examples:
        >>> utc = Timezone.utc()
        >>> t = Instant(2024, 1, 31, 9, 30, timezone=utc)
        >>> t.add_month()
        Instant(2024, 2, 29, 9, 30, 0, nanosecond=0, timezone=UTC)

        >>> t.start_week()
        Instant(2024, 1, 29, 0, 0, 0, nanosecond=0, timezone=UTC)
    """

    __slots__ = ("_days", "_nanos", "_tz")

    @validate_range(
        hour=(0, 23),
        minute=(0, 59),
        second=(0, 59),
        nanosecond=(0, NANOS_PER_SECOND - 1),
    )
    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
        timezone: Timezone | None = None,
        config: Config | None = None,
    ) -> None:
        """Create an Instant from component parts.

        Components are validated strictly; use the navigation methods to
        move by calendar offsets that may overflow.

        Args:
            year: The year (-9999 to 9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: Nanoseconds within the second.
            timezone: Timezone of the wall-clock components. Defaults to
                the configured default timezone.
            config: Config supplying the default timezone.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_date(year, month, day)
        self._days: int = ymd_to_mjd(year, month, day)
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )
        self._tz: Timezone = resolve_timezone(timezone, config)

    @classmethod
    def _from_internal(cls, days: int, nanos: int, tz: Timezone) -> Instant:
        """Create an Instant from local MJD days and local nanoseconds.

        Nanoseconds outside a single day are carried into days.
        """
        carry, nanos = divmod(nanos, NANOS_PER_DAY)
        instance = object.__new__(cls)
        instance._days = days + carry
        instance._nanos = nanos
        instance._tz = tz
        return instance

    @classmethod
    def _from_utc_nanos(cls, utc_nanos: int, tz: Timezone) -> Instant:
        """Create an Instant from nanoseconds since MJD 0 UTC."""
        return cls._from_internal(0, utc_nanos + tz.offset_seconds * NANOS_PER_SECOND, tz)

    @classmethod
    def _compose(
        cls,
        year: int,
        month: int,
        day: int,
        nanos_of_day: int,
        tz: Timezone,
        day_offset: int = 0,
    ) -> Instant:
        """Build an Instant from a valid date, shifted by whole days.

        Raises:
            ValidationError: If the date is invalid or the year out of range.
        """
        validate_date(year, month, day)
        result = cls._from_internal(ymd_to_mjd(year, month, day) + day_offset, nanos_of_day, tz)
        if day_offset:
            validate_year(result.year)
        return result

    # Construction

    @classmethod
    def now(cls, timezone: Timezone | None = None, config: Config | None = None) -> Instant:
        """Return the current time in the given or configured timezone."""
        return cls.from_unix_nanos(time.time_ns(), timezone=timezone, config=config)

    @classmethod
    def zero(cls) -> Instant:
        """Return the zero Instant, 0001-01-01 00:00:00 UTC."""
        return cls._from_utc_nanos(_ZERO_EPOCH_NANOS, Timezone.utc())

    @classmethod
    def from_unix_seconds(
        cls,
        seconds: int,
        *,
        timezone: Timezone | None = None,
        config: Config | None = None,
    ) -> Instant:
        """Create an Instant from a Unix timestamp in seconds."""
        return cls.from_unix_nanos(seconds * NANOS_PER_SECOND, timezone=timezone, config=config)

    @classmethod
    def from_unix_millis(
        cls,
        millis: int,
        *,
        timezone: Timezone | None = None,
        config: Config | None = None,
    ) -> Instant:
        """Create an Instant from a Unix timestamp in milliseconds."""
        return cls.from_unix_nanos(millis * NANOS_PER_MILLISECOND, timezone=timezone, config=config)

    @classmethod
    def from_unix_nanos(
        cls,
        nanos: int,
        *,
        timezone: Timezone | None = None,
        config: Config | None = None,
    ) -> Instant:
        """Create an Instant from a Unix timestamp in nanoseconds.

        Raises:
            ValidationError: If the timestamp falls outside the years -9999
                to 9999.

        Examples:
            >>> Instant.from_unix_nanos(1_500_000_000, timezone=Timezone.utc())
            Instant(1970, 1, 1, 0, 0, 1, nanosecond=500000000, timezone=UTC)
        """
        tz = resolve_timezone(timezone, config)
        result = cls._from_utc_nanos(_UNIX_EPOCH_NANOS + nanos, tz)
        validate_year(result.year)
        return result

    @classmethod
    def from_unix(
        cls,
        value: int,
        *,
        timezone: Timezone | None = None,
        config: Config | None = None,
    ) -> Instant:
        """Create an Instant from a timestamp in seconds or nanoseconds.

        Values of at most ten digits are read as seconds, anything larger
        as nanoseconds. Prefer the explicit from_unix_* constructors when
        the unit is known.
        """
        from almanac.navigation.precision import from_unix

        return from_unix(value, timezone=timezone, config=config)

    # Components

    @property
    def year(self) -> int:
        return mjd_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        return mjd_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        return mjd_to_ymd(self._days)[2]

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    @property
    def nanos_of_day(self) -> int:
        """Return nanoseconds elapsed since local midnight."""
        return self._nanos

    @property
    def timezone(self) -> Timezone:
        return self._tz

    @property
    def weekday(self) -> int:
        """Return the day of the week, 0=Sunday through 6=Saturday."""
        return mjd_to_weekday(self._days)

    @property
    def iso_weekday(self) -> int:
        """Return the day of the week, 1=Monday through 7=Sunday."""
        return mjd_to_iso_weekday(self._days)

    @property
    def year_day(self) -> int:
        """Return the day of the year, 1-365 (1-366 in leap years)."""
        return day_of_year(*mjd_to_ymd(self._days))

    @property
    def days(self) -> int:
        """Return the number of days in this Instant's year."""
        return days_in_year(self.year)

    @property
    def month_days(self) -> int:
        """Return the number of days in this Instant's month."""
        year, month, _ = mjd_to_ymd(self._days)
        return days_in_month(year, month)

    def date(self) -> tuple[int, int, int]:
        """Return the local (year, month, day)."""
        return mjd_to_ymd(self._days)

    def clock(self) -> tuple[int, int, int]:
        """Return the local (hour, minute, second)."""
        return self.hour, self.minute, self.second

    @property
    def is_zero(self) -> bool:
        """Return True if this is the zero Instant, 0001-01-01 00:00:00 UTC."""
        return self._utc_nanos() == _ZERO_EPOCH_NANOS

    def zero_or(self, other: Instant) -> Instant:
        """Return other when this Instant is zero, otherwise self."""
        return other if self.is_zero else self

    # Timeline position

    def _utc_nanos(self) -> int:
        """Return nanoseconds since MJD 0 UTC."""
        return self._days * NANOS_PER_DAY + self._nanos - self._tz.offset_seconds * NANOS_PER_SECOND

    def to_unix_seconds(self) -> int:
        """Return whole seconds since the Unix epoch, rounded toward the past."""
        return self.to_unix_nanos() // NANOS_PER_SECOND

    def to_unix_nanos(self) -> int:
        """Return nanoseconds since the Unix epoch."""
        return self._utc_nanos() - _UNIX_EPOCH_NANOS

    def unix(self, n: int = 0) -> int:
        """Return the Unix timestamp with n fractional digits (see precision.unix)."""
        from almanac.navigation.precision import unix

        return unix(self, n)

    def precise_second(self, n: int = 0) -> int:
        """Return whole seconds, or the first n digits of the fraction (see precision.second)."""
        from almanac.navigation.precision import second

        return second(self, n)

    # Timezone conversion

    def in_timezone(self, timezone: Timezone) -> Instant:
        """Return the same point in time expressed in another timezone."""
        return Instant._from_utc_nanos(self._utc_nanos(), timezone)

    def to_utc(self) -> Instant:
        return self.in_timezone(Timezone.utc())

    def to_local(self, config: Config | None = None) -> Instant:
        """Return the same point in time in the configured default timezone."""
        return self.in_timezone(resolve_timezone(None, config))

    # Linear arithmetic

    def add(self, duration: Duration) -> Instant:
        """Return this Instant moved by an exact Duration.

        Raises:
            ValidationError: If the result leaves the years -9999 to 9999.
        """
        return self + duration

    def sub(self, other: Instant) -> Duration:
        """Return the exact Duration self - other."""
        return self - other

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        result = Instant._from_internal(self._days, self._nanos + other.total_nanoseconds, self._tz)
        validate_year(result.year)
        return result

    def __radd__(self, other: object) -> Instant:
        return self.__add__(other)

    def __sub__(self, other: object) -> Instant | Duration:
        if isinstance(other, Duration):
            return self + (-other)
        if isinstance(other, Instant):
            return Duration(nanoseconds=self._utc_nanos() - other._utc_nanos())
        return NotImplemented

    def round(self, d: Duration) -> Instant:
        """Round to the nearest multiple of d since 0001-01-01 00:00:00 UTC.

        Halfway values round up, toward the future. A non-positive d
        returns this Instant unchanged.
        """
        step = d.total_nanoseconds
        if step <= 0:
            return self
        remainder = (self._utc_nanos() - _ZERO_EPOCH_NANOS) % step
        if remainder + remainder < step:
            return self + Duration(nanoseconds=-remainder)
        return self + Duration(nanoseconds=step - remainder)

    def truncate(self, d: Duration) -> Instant:
        """Round down to a multiple of d since 0001-01-01 00:00:00 UTC.

        A non-positive d returns this Instant unchanged.
        """
        step = d.total_nanoseconds
        if step <= 0:
            return self
        remainder = (self._utc_nanos() - _ZERO_EPOCH_NANOS) % step
        return self + Duration(nanoseconds=-remainder)

    # Calendar navigation

    def add_year(self, *ymd: int) -> Instant:
        from almanac.navigation.shift import add_year

        return add_year(self, *ymd)

    def add_month(self, *md: int) -> Instant:
        from almanac.navigation.shift import add_month

        return add_month(self, *md)

    def add_day(self, d: int = 1) -> Instant:
        from almanac.navigation.shift import add_day

        return add_day(self, d)

    def go(self, years: int, month: int | None = None, day: int | None = None) -> Instant:
        from almanac.navigation.offsets import go

        return go(self, years, month, day)

    def go_year(self, year: int, month: int | None = None, day: int | None = None) -> Instant:
        from almanac.navigation.offsets import go_year

        return go_year(self, year, month, day)

    def go_month(self, month: int, day: int = 0) -> Instant:
        from almanac.navigation.offsets import go_month

        return go_month(self, month, day)

    def go_day(self, day: int) -> Instant:
        from almanac.navigation.offsets import go_day

        return go_day(self, day)

    def start(self, *ymd: int) -> Instant:
        from almanac.navigation.windows import start

        return start(self, *ymd)

    def start_month(self, month: int = 0, day: int = 0) -> Instant:
        from almanac.navigation.windows import start_month

        return start_month(self, month, day)

    def start_day(self, day: int = 0) -> Instant:
        from almanac.navigation.windows import start_day

        return start_day(self, day)

    def start_week(self, n: int = 0) -> Instant:
        from almanac.navigation.windows import start_week

        return start_week(self, n)

    def end(self, *ymd: int) -> Instant:
        from almanac.navigation.windows import end

        return end(self, *ymd)

    def end_month(self, month: int = 0, day: int = 0) -> Instant:
        from almanac.navigation.windows import end_month

        return end_month(self, month, day)

    def end_day(self, day: int = 0) -> Instant:
        from almanac.navigation.windows import end_day

        return end_day(self, day)

    def end_week(self, n: int = 0) -> Instant:
        from almanac.navigation.windows import end_week

        return end_week(self, n)

    def diff_in(self, other: Instant, unit: Unit | str) -> float:
        from almanac.navigation.difference import diff_in

        return diff_in(self, other, unit)

    def diff_abs_in(self, other: Instant, unit: Unit | str) -> float:
        from almanac.navigation.difference import diff_abs_in

        return diff_abs_in(self, other, unit)

    # Comparison

    def compare(self, other: Instant) -> int:
        """Return -1 if self is before other, 1 if after, 0 if equal."""
        a, b = self._utc_nanos(), other._utc_nanos()
        return (a > b) - (a < b)

    def before(self, other: Instant) -> bool:
        return self._utc_nanos() < other._utc_nanos()

    def after(self, other: Instant) -> bool:
        return self._utc_nanos() > other._utc_nanos()

    def equal(self, other: Instant) -> bool:
        return self._utc_nanos() == other._utc_nanos()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc_nanos() == other._utc_nanos()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc_nanos() < other._utc_nanos()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc_nanos() <= other._utc_nanos()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc_nanos() > other._utc_nanos()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._utc_nanos() >= other._utc_nanos()

    def __hash__(self) -> int:
        return hash(self._utc_nanos())

    def __repr__(self) -> str:
        year, month, day = mjd_to_ymd(self._days)
        return (
            f"Instant({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, nanosecond={self.nanosecond}, timezone={self._tz})"
        )

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        from almanac.format.layout import format_iso

        return format_iso(self)


def since(t: Instant) -> Duration:
    """Return the time elapsed since t, shorthand for Instant.now() - t."""
    return Instant.now(t.timezone) - t


def until(t: Instant) -> Duration:
    """Return the time remaining until t, shorthand for t - Instant.now()."""
    return t - Instant.now(t.timezone)


__all__ = ["Instant", "since", "until"]
