"""Internal utilities for Almanac.

This module contains private implementation details:
    - Constants and magic numbers
    - MJD day-number conversions (almanac._internal.ordinal)
    - Validation helpers for strict constructors

Note: This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.validation import (
    validate_arity,
    validate_date,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_arity",
    "validate_date",
    "validate_range",
    "validate_year",
]
