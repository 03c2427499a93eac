"""Validation utilities for Almanac.

Strict constructors use these to reject out-of-range components. The
navigation engine normalizes its inputs before it reaches them.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from almanac._internal.constants import MIN_YEAR, MAX_YEAR
from almanac.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Args:
        **limits: Mapping of parameter names to inclusive (min, max) tuples.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23))
        ... def at(hour: int) -> int:
        ...     return hour

        >>> at(24)
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise ValidationError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_arity(name: str, offsets: tuple[int, ...], limit: int) -> None:
    """Reject calls passing more than limit trailing offsets.

    Raises:
        TypeError: Mirrors the error Python raises for surplus arguments.
    """
    if len(offsets) > limit:
        raise TypeError(f"{name}() takes at most {limit} offsets ({len(offsets)} given)")


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid date.

    Raises:
        ValidationError: If any component is out of range.
    """
    from almanac.calendar import days_in_month

    validate_year(year)
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "validate_arity",
    "validate_range",
    "validate_year",
    "validate_date",
]
