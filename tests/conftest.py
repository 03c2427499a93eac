"""Pytest configuration and fixtures for Almanac tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so almanac can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from almanac import Timezone  # noqa: E402


@pytest.fixture
def utc() -> Timezone:
    """The UTC timezone."""
    return Timezone.utc()


@pytest.fixture
def shanghai() -> Timezone:
    """A +08:00 fixed offset."""
    return Timezone.from_hours(8)
