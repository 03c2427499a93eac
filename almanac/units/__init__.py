"""Unit types for Almanac.

This module provides:
    - Timezone: fixed UTC offset timezone
    - Unit: difference granularity (year, month, day, hour, minute, second)
"""

from __future__ import annotations

from almanac.units.timezone import Timezone
from almanac.units.unit import Unit

__all__: list[str] = [
    "Timezone",
    "Unit",
]
