"""JSON marshaling of Instants.

An Instant is encoded as a JSON string in the "YYYY-MM-DD HH:MM:SS"
layout, in its own timezone. Decoding accepts any layout understood by
:func:`almanac.format.parse_datetime` and reads offset-less text in the
given or configured timezone.

Examples:
    >>> from almanac import Instant, Timezone
    >>> t = Instant(2024, 1, 15, 14, 30, 45, timezone=Timezone.utc())
    >>> to_json(t)
    '"2024-01-15 14:30:45"'
    >>> from_json('"2024-01-15 14:30:45"', timezone=Timezone.utc()) == t
    True
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from almanac.errors import ParseError
from almanac.format.layout import format_datetime, parse_datetime

if TYPE_CHECKING:
    from almanac.config import Config
    from almanac.core.instant import Instant
    from almanac.units.timezone import Timezone


def to_json(t: Instant) -> str:
    """Return t as a JSON string literal."""
    return json.dumps(format_datetime(t))


def from_json(
    text: str | bytes,
    *,
    timezone: Timezone | None = None,
    config: Config | None = None,
) -> Instant:
    """Decode an Instant from a JSON string literal.

    Raises:
        ParseError: If the text is not valid JSON, not a JSON string, or
            not a recognized datetime layout.
    """
    try:
        value = json.loads(text)
    except ValueError as exc:
        raise ParseError(f"invalid JSON: {exc}") from exc

    if not isinstance(value, str):
        raise ParseError(f"expected JSON string, got {type(value).__name__}")
    return parse_datetime(value, timezone=timezone, config=config)


__all__ = [
    "to_json",
    "from_json",
]
