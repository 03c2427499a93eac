"""Text layouts for Instants.

Functions:
    format_datetime: "YYYY-MM-DD HH:MM:SS" in the Instant's own timezone.
    format_iso: ISO 8601 with minimal fractional digits and an offset.
    parse_datetime: Parse either layout, or a bare date.

Accepted input:
    - YYYY-MM-DD
    - YYYY-MM-DD HH:MM:SS
    - YYYY-MM-DDTHH:MM:SS
    - either of the above with .f (1-9 fractional digits)
    - either of the above with Z, +HH:MM, +HHMM or +HH

Text without an offset is read in the given timezone, or the configured
default one. Negative years are written with a leading minus sign.

Examples:
    >>> from almanac import Instant, Timezone
    >>> t = Instant(2024, 1, 15, 14, 30, 45, nanosecond=500_000_000, timezone=Timezone.utc())
    >>> format_datetime(t)
    '2024-01-15 14:30:45'
    >>> format_iso(t)
    '2024-01-15T14:30:45.5Z'
    >>> parse_datetime("2024-01-15T14:30:45.5Z") == t
    True
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from almanac.errors import ParseError
from almanac.units.timezone import Timezone

if TYPE_CHECKING:
    from almanac.config import Config
    from almanac.core.instant import Instant

_DATETIME_PATTERN = re.compile(
    r"^(?P<year>-?\d{4,})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)?)?$"
)


def _format_date(t: Instant) -> str:
    year, month, day = t.date()
    if year >= 0:
        return f"{year:04d}-{month:02d}-{day:02d}"
    return f"{year:05d}-{month:02d}-{day:02d}"


def format_datetime(t: Instant) -> str:
    """Return "YYYY-MM-DD HH:MM:SS"; sub-seconds and offset are dropped."""
    return f"{_format_date(t)} {t.hour:02d}:{t.minute:02d}:{t.second:02d}"


def format_iso(t: Instant) -> str:
    """Return an ISO 8601 string such as "2024-01-15T14:30:45.25+08:00"."""
    text = f"{_format_date(t)}T{t.hour:02d}:{t.minute:02d}:{t.second:02d}"
    if t.nanosecond:
        text += f".{t.nanosecond:09d}".rstrip("0")
    return text + ("Z" if t.timezone.is_utc else str(t.timezone))


def parse_datetime(
    text: str,
    *,
    timezone: Timezone | None = None,
    config: Config | None = None,
) -> Instant:
    """Parse an Instant from one of the accepted layouts.

    Args:
        text: The text to parse; surrounding whitespace is ignored.
        timezone: Timezone for text without an offset.
        config: Config supplying the default timezone.

    Raises:
        ParseError: If the text matches no accepted layout.
        ValidationError: If a component is out of range (e.g. month 13).
        TimezoneError: If the offset is out of range.
    """
    from almanac.core.instant import Instant

    if not isinstance(text, str):
        raise ParseError(f"expected str, got {type(text).__name__}")

    match = _DATETIME_PATTERN.match(text.strip())
    if match is None:
        raise ParseError(f"cannot parse datetime: {text!r}")

    fields = match.groupdict()
    if fields["offset"] is not None:
        timezone = Timezone.from_string(fields["offset"])
    fraction = fields["fraction"] or ""

    return Instant(
        int(fields["year"]),
        int(fields["month"]),
        int(fields["day"]),
        int(fields["hour"] or 0),
        int(fields["minute"] or 0),
        int(fields["second"] or 0),
        nanosecond=int(fraction.ljust(9, "0")) if fraction else 0,
        timezone=timezone,
        config=config,
    )


__all__ = [
    "format_datetime",
    "format_iso",
    "parse_datetime",
]
