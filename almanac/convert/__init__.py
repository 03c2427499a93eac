"""Conversions between Instants and external representations.

Functions:
    to_json: Encode an Instant as a JSON string literal.
    from_json: Decode an Instant from a JSON string literal.
    to_py: Convert an Instant to a standard library datetime.
    from_py: Create an Instant from a standard library datetime or date.
"""

from __future__ import annotations

from almanac.convert.json import from_json, to_json
from almanac.convert.pydatetime import from_py, to_py

__all__: list[str] = [
    "to_json",
    "from_json",
    "to_py",
    "from_py",
]
