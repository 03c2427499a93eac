"""Tests for the Unit enumeration."""

import pytest

from almanac import Duration, Unit


class TestUnitTags:
    """Tests for tag lookup."""

    @pytest.mark.parametrize(
        "unit,tag",
        [
            (Unit.YEAR, "y"),
            (Unit.MONTH, "M"),
            (Unit.DAY, "d"),
            (Unit.HOUR, "h"),
            (Unit.MINUTE, "m"),
            (Unit.SECOND, "s"),
        ],
    )
    def test_tag_round_trip(self, unit, tag):
        """Test that every tag resolves to its Unit."""
        assert unit.tag == tag
        assert Unit.from_tag(tag) is unit

    def test_from_unit(self):
        """Test that a Unit passes through from_tag unchanged."""
        assert Unit.from_tag(Unit.HOUR) is Unit.HOUR

    @pytest.mark.parametrize("tag", ["w", "Y", "H", "", "hour"])
    def test_unknown_tag(self, tag):
        """Test that unknown tags resolve to None."""
        assert Unit.from_tag(tag) is None


class TestUnitLengths:
    """Tests for fixed unit lengths."""

    def test_clock_units(self):
        """Test the nanosecond length of each clock unit."""
        assert Unit.DAY.nanoseconds == Duration(days=1).total_nanoseconds
        assert Unit.HOUR.nanoseconds == Duration(hours=1).total_nanoseconds
        assert Unit.MINUTE.nanoseconds == Duration(minutes=1).total_nanoseconds
        assert Unit.SECOND.nanoseconds == Duration(seconds=1).total_nanoseconds

    def test_calendar_units_have_no_length(self):
        """Test that years and months vary in length."""
        assert Unit.YEAR.nanoseconds is None
        assert Unit.MONTH.nanoseconds is None
