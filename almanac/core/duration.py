"""Duration class representing an exact span of time.

A Duration is what subtracting two Instants yields and what can be added
to an Instant linearly. It is stored as a single signed count of
nanoseconds; unit views (hours, minutes, seconds) are floats.
"""

from __future__ import annotations

from almanac._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class Duration:
    """A signed span of time with nanosecond precision.

    Examples:
        >>> Duration(hours=36).hours
        36.0

        >>> Duration(minutes=90) == Duration(hours=1, minutes=30)
        True

        >>> str(Duration(days=1, seconds=5))
        '1 day, 0:00:05'
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All components are integers and may be negative; they are summed.
        """
        self._nanos: int = (
            days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )

    @classmethod
    def zero(cls) -> Duration:
        return cls()

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        return cls(nanoseconds=nanoseconds)

    @property
    def total_nanoseconds(self) -> int:
        """Return the exact length in nanoseconds."""
        return self._nanos

    @property
    def hours(self) -> float:
        """Return the length as a floating-point number of hours."""
        return self._nanos / NANOS_PER_HOUR

    @property
    def minutes(self) -> float:
        """Return the length as a floating-point number of minutes."""
        return self._nanos / NANOS_PER_MINUTE

    @property
    def seconds(self) -> float:
        """Return the length as a floating-point number of seconds."""
        return self._nanos / NANOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        return self._nanos < 0

    @property
    def is_zero(self) -> bool:
        return self._nanos == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos + other._nanos)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos - other._nanos)

    def __mul__(self, other: object) -> Duration:
        """Scale by an integer.

        Examples:
            >>> Duration(minutes=15) * 4 == Duration(hours=1)
            True
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration(nanoseconds=self._nanos * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Duration:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("integer division or modulo by zero")
        return Duration(nanoseconds=self._nanos // other)

    def __neg__(self) -> Duration:
        return Duration(nanoseconds=-self._nanos)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return -self if self._nanos < 0 else self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __bool__(self) -> bool:
        return self._nanos != 0

    def __repr__(self) -> str:
        return f"Duration(nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return a string like "2 days, 3:04:05.5" or "-0:00:30"."""
        sign = "-" if self._nanos < 0 else ""
        days, rest = divmod(abs(self._nanos), NANOS_PER_DAY)
        hours, rest = divmod(rest, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        secs, nanos = divmod(rest, NANOS_PER_SECOND)

        text = f"{hours}:{minutes:02d}:{secs:02d}"
        if nanos:
            text += f".{nanos:09d}".rstrip("0")
        if days:
            text = f"{days} day{'s' if days != 1 else ''}, {text}"
        return sign + text


__all__ = ["Duration"]
