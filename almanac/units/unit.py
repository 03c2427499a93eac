"""Unit enumeration for calendar differences.

Each Unit carries the short tag accepted wherever a unit can be named by
string: "y" for years, "M" for months, "d", "h", "m", "s" for days, hours,
minutes and seconds. Tags are case-sensitive ("M" is month, "m" minute).
"""

from __future__ import annotations

from enum import Enum

from almanac._internal.constants import NANOS_PER_DAY, NANOS_PER_HOUR, NANOS_PER_MINUTE, NANOS_PER_SECOND


class Unit(Enum):
    """Granularity of a difference or offset operation.

    Examples:
        >>> Unit.from_tag("M") is Unit.MONTH
        True

        >>> Unit.from_tag("w") is None
        True

        >>> Unit.HOUR.nanoseconds
        3600000000000
    """

    YEAR = "y"
    MONTH = "M"
    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def nanoseconds(self) -> int | None:
        """Return the fixed length of one unit, or None for YEAR and MONTH."""
        return _FIXED_LENGTHS.get(self)

    @classmethod
    def from_tag(cls, tag: str | Unit) -> Unit | None:
        """Look up a Unit by short tag; None when the tag is unknown."""
        if isinstance(tag, Unit):
            return tag
        try:
            return cls(tag)
        except ValueError:
            return None


_FIXED_LENGTHS: dict[Unit, int] = {
    Unit.DAY: NANOS_PER_DAY,
    Unit.HOUR: NANOS_PER_HOUR,
    Unit.MINUTE: NANOS_PER_MINUTE,
    Unit.SECOND: NANOS_PER_SECOND,
}


__all__ = ["Unit"]
