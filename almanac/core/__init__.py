"""Core temporal types for Almanac.

This module provides:
    - Instant: timezone-aware point in time with nanosecond precision
    - Duration: exact signed span of time
    - since, until: elapsed/remaining time relative to now
"""

from __future__ import annotations

from almanac.core.duration import Duration
from almanac.core.instant import Instant, since, until

__all__: list[str] = [
    "Duration",
    "Instant",
    "since",
    "until",
]
