"""Sub-second and fractional timestamp accessors.

Digit counts are clamped rather than rejected, and extra digits are
truncated, never rounded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from almanac._internal.constants import UNIX_SECONDS_MAX
from almanac.calendar import clamp

if TYPE_CHECKING:
    from almanac.config import Config
    from almanac.core.instant import Instant
    from almanac.units.timezone import Timezone

logger = logging.getLogger(__name__)


def second(t: Instant, n: int = 0) -> int:
    """Return whole seconds, or the leading n digits of the fraction.

    Args:
        t: The Instant.
        n: 0 for the seconds field (0-59); 1-9 for that many fractional
            digits. Values outside 1-9 are clamped.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> t = Instant(2024, 1, 1, 0, 0, 7, nanosecond=123_456_789, timezone=Timezone.utc())
        >>> second(t), second(t, 3), second(t, 9), second(t, 42)
        (7, 123, 123456789, 123456789)
    """
    if n == 0:
        return t.second
    return t.nanosecond // 10 ** (9 - clamp(n, 1, 9))


def unix(t: Instant, n: int = 0) -> int:
    """Return the Unix timestamp carrying n fractional digits.

    n = 0 gives seconds (10 digits today), 3 milliseconds, 6 microseconds
    and 9 nanoseconds. The total digit count n + 10 is clamped to 1-19.
    The quotient is truncated toward zero.

    Examples:
        >>> from almanac import Instant, Timezone
        >>> t = Instant.from_unix_nanos(1_700_000_000_123_456_789, timezone=Timezone.utc())
        >>> unix(t), unix(t, 3), unix(t, 9)
        (1700000000, 1700000000123, 1700000000123456789)
    """
    if n == 0:
        return t.to_unix_seconds()
    divisor = 10 ** (19 - clamp(n + 10, 1, 19))
    nanos = t.to_unix_nanos()
    quotient = abs(nanos) // divisor
    return quotient if nanos >= 0 else -quotient


def from_unix(
    value: int,
    *,
    timezone: Timezone | None = None,
    config: Config | None = None,
) -> Instant:
    """Create an Instant from a timestamp whose unit is guessed from its size.

    Values up to 9_999_999_999 are seconds; larger values are nanoseconds.
    Millisecond and microsecond timestamps are therefore misread; use the
    explicit Instant.from_unix_* constructors for those.
    """
    from almanac.core.instant import Instant

    if value <= UNIX_SECONDS_MAX:
        return Instant.from_unix_seconds(value, timezone=timezone, config=config)
    logger.debug("timestamp %d has more than 10 digits, reading as nanoseconds", value)
    return Instant.from_unix_nanos(value, timezone=timezone, config=config)


__all__ = [
    "second",
    "unix",
    "from_unix",
]
