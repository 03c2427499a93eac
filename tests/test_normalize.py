"""Tests for calendar component normalization."""

import pytest

from almanac import Instant, Timezone, days_in
from almanac.navigation import normalize


class TestNormalize:
    """Tests for normalize."""

    def test_identity_on_valid_dates(self):
        """Test that a valid triple comes back unchanged."""
        for year in (1900, 2000, 2023, 2024):
            for month in range(1, 13):
                for day in (1, 15, days_in(year, month)):
                    assert normalize(year, month, day) == (year, month, day)

    @pytest.mark.parametrize(
        "triple,expected",
        [
            ((2024, 13, 1), (2025, 1, 1)),
            ((2024, 14, 31), (2025, 2, 28)),
            ((2024, 0, 15), (2023, 12, 15)),
            ((2024, -11, 31), (2023, 1, 31)),
            ((2024, -12, 31), (2022, 12, 31)),
            ((2024, 25, 10), (2026, 1, 10)),
        ],
    )
    def test_month_carry(self, triple, expected):
        """Test that months outside 1-12 carry into the year."""
        assert normalize(*triple) == expected

    def test_day_saturates(self):
        """Test that the day clamps to the month instead of rolling over."""
        assert normalize(2024, 2, 31) == (2024, 2, 29)
        assert normalize(2023, 2, 31) == (2023, 2, 28)
        assert normalize(2024, 4, 31) == (2024, 4, 30)

    def test_day_floor(self):
        """Test that non-positive days clamp to the 1st."""
        assert normalize(2024, 3, 0) == (2024, 3, 1)

    def test_matches_repeated_month_steps(self):
        """Test that one k-month jump equals k single-month steps."""
        t = Instant(2023, 12, 1, 6, timezone=Timezone.utc())
        stepped = t
        for k in range(1, 40):
            stepped = stepped.add_month()
            assert normalize(2023, 12 + k, 1) == stepped.date()
            assert t.add_month(k) == stepped

    def test_matches_repeated_backward_steps(self):
        """Test the carry for negative month offsets."""
        t = Instant(2024, 1, 1, timezone=Timezone.utc())
        stepped = t
        for k in range(1, 30):
            stepped = stepped.add_month(-1)
            assert normalize(2024, 1 - k, 1) == stepped.date()
