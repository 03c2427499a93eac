"""Calendar navigation and interval arithmetic.

Functions in this package take an Instant and return a new Instant or a
number. They are also available as methods on Instant.

Normalization (from almanac.navigation.normalize):
    - normalize: carry month overflow into the year, clamp the day

Shifting (from almanac.navigation.shift):
    - add_year, add_month, add_day

Selection (from almanac.navigation.offsets):
    - go, go_year, go_month, go_day
    - resolve_month, resolve_day

Period boundaries (from almanac.navigation.windows):
    - start, end, start_month, end_month, start_day, end_day
    - start_week, end_week

Differences (from almanac.navigation.difference):
    - diff_in, diff_abs_in

Precision (from almanac.navigation.precision):
    - second, unix, from_unix
"""

from __future__ import annotations

from almanac.navigation.difference import diff_abs_in, diff_in
from almanac.navigation.normalize import normalize
from almanac.navigation.offsets import (
    go,
    go_day,
    go_month,
    go_year,
    resolve_day,
    resolve_month,
)
from almanac.navigation.precision import from_unix, second, unix
from almanac.navigation.shift import add_day, add_month, add_year
from almanac.navigation.windows import (
    end,
    end_day,
    end_month,
    end_week,
    start,
    start_day,
    start_month,
    start_week,
)

__all__ = [
    # Normalization
    "normalize",
    # Shifting
    "add_year",
    "add_month",
    "add_day",
    # Selection
    "go",
    "go_year",
    "go_month",
    "go_day",
    "resolve_month",
    "resolve_day",
    # Period boundaries
    "start",
    "end",
    "start_month",
    "start_day",
    "start_week",
    "end_month",
    "end_day",
    "end_week",
    # Differences
    "diff_in",
    "diff_abs_in",
    # Precision
    "second",
    "unix",
    "from_unix",
]
