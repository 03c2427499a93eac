"""Fixed-offset timezones.

Almanac models a timezone as a constant UTC offset. There is no IANA
database and no daylight-saving rule: an Instant keeps the offset it was
built with until explicitly converted.
"""

from __future__ import annotations

import re
import time
from typing import ClassVar

from almanac._internal.constants import MAX_UTC_OFFSET_SECONDS, SECONDS_PER_HOUR
from almanac.errors import TimezoneError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")


class Timezone:
    """A timezone represented as a UTC offset.

    The offset is stored in seconds, positive east of UTC. Two timezones
    with the same offset compare equal regardless of their names.

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> Timezone.from_hours(8).offset_seconds
        28800

        >>> str(Timezone.from_string("-0530"))
        '-05:30'
    """

    __slots__ = ("_offset_seconds", "_name")

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a Timezone with the specified UTC offset.

        Args:
            offset_seconds: UTC offset in seconds, within +/-14 hours.
            name: Optional display name (e.g., "CST").

        Raises:
            TimezoneError: If offset_seconds is not an int or out of range.
        """
        if not isinstance(offset_seconds, int) or isinstance(offset_seconds, bool):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )
        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int = offset_seconds
        self._name: str | None = name

    @classmethod
    def utc(cls) -> Timezone:
        """Return the shared UTC timezone instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def local(cls) -> Timezone:
        """Return the system's current local UTC offset as a Timezone.

        The offset is sampled once; later DST transitions on the host do
        not affect the returned value.
        """
        now = time.localtime()
        return cls(now.tm_gmtoff, now.tm_zone or None)

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from an hour offset and optional minutes.

        Args:
            hours: Hour component; its sign gives the direction.
            minutes: Minute component (0-59), always non-negative.

        Raises:
            TimezoneError: If minutes is out of range or the total offset is.

        Examples:
            >>> Timezone.from_hours(-3, 30).offset_seconds
            -12600
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")

        sign = -1 if hours < 0 else 1
        return cls(hours * SECONDS_PER_HOUR + sign * minutes * 60)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse "Z", "UTC", "+HH:MM", "+HHMM" or "+HH" into a Timezone.

        Raises:
            TimezoneError: If the string cannot be parsed.
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        s = s.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(s)
        if not match:
            raise TimezoneError(f"Cannot parse timezone string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (hours * SECONDS_PER_HOUR + minutes * 60))

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds, positive east of UTC."""
        return self._offset_seconds

    @property
    def offset_hours(self) -> float:
        """Return the UTC offset in hours, e.g. 5.5 for +05:30."""
        return self._offset_seconds / SECONDS_PER_HOUR

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_utc(self) -> bool:
        return self._offset_seconds == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return "UTC" for a zero offset, otherwise "+HH:MM" / "-HH:MM"."""
        if self._offset_seconds == 0:
            return "UTC"

        hours, minutes = divmod(abs(self._offset_seconds) // 60, 60)
        sign = "+" if self._offset_seconds > 0 else "-"
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["Timezone"]
