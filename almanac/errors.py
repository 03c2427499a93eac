"""Almanac exception hierarchy.

All Almanac-specific exceptions inherit from AlmanacError. The calendar
navigation functions never raise these for out-of-range offsets; offsets
are normalized instead. Only strict constructors and parsers raise.
"""

from __future__ import annotations


class AlmanacError(Exception):
    """Base exception for all Almanac errors."""

    pass


class ValidationError(AlmanacError):
    """Invalid input values.

    Raised when a component given to a strict constructor is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
        - Year outside -9999..9999
    """

    pass


class ParseError(AlmanacError):
    """Failed to parse a textual datetime.

    Examples:
        - Text that matches none of the accepted layouts
        - A JSON payload that is not a string
    """

    pass


class TimezoneError(AlmanacError):
    """Invalid timezone specification.

    Examples:
        - Invalid UTC offset format
        - Offset outside the +/-14 hour range
    """

    pass


__all__ = [
    "AlmanacError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
]
