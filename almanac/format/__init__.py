"""Formatting and parsing of Instants.

Functions:
    format_datetime: Format as "YYYY-MM-DD HH:MM:SS".
    format_iso: Format as ISO 8601 with offset.
    parse_datetime: Parse a date, date-time or ISO 8601 string.
"""

from __future__ import annotations

from almanac.format.layout import format_datetime, format_iso, parse_datetime

__all__: list[str] = [
    "format_datetime",
    "format_iso",
    "parse_datetime",
]
