"""Tests for sub-second and fractional timestamp accessors."""

import logging

import pytest

from almanac import Instant, Timezone
from almanac.navigation import from_unix, second, unix


@pytest.fixture
def stamp():
    """1700000000.123456789 seconds after the epoch, in UTC."""
    return Instant.from_unix_nanos(1_700_000_000_123_456_789, timezone=Timezone.utc())


class TestSecond:
    """Tests for second."""

    def test_whole_seconds(self, stamp):
        """Test n=0 returns the seconds field."""
        assert second(stamp) == 20
        assert stamp.precise_second() == 20

    @pytest.mark.parametrize(
        "n,expected",
        [(1, 1), (3, 123), (6, 123456), (9, 123456789)],
    )
    def test_fraction_digits(self, stamp, n, expected):
        """Test leading fractional digits, truncated."""
        assert second(stamp, n) == expected
        assert stamp.precise_second(n) == expected

    def test_clamped(self, stamp):
        """Test that n outside 1-9 is clamped."""
        assert second(stamp, 42) == 123456789
        assert second(stamp, -5) == 1


class TestUnix:
    """Tests for unix."""

    @pytest.mark.parametrize(
        "n,expected",
        [
            (0, 1_700_000_000),
            (3, 1_700_000_000_123),
            (6, 1_700_000_000_123_456),
            (9, 1_700_000_000_123_456_789),
            (20, 1_700_000_000_123_456_789),
            (-5, 17_000),
            (-20, 1),
        ],
    )
    def test_digits(self, stamp, n, expected):
        """Test the digit count mapping and its clamping."""
        assert unix(stamp, n) == expected
        assert stamp.unix(n) == expected

    def test_truncates_toward_zero(self):
        """Test pre-epoch timestamps."""
        t = Instant.from_unix_nanos(-1_234_567_890, timezone=Timezone.utc())
        assert unix(t, 3) == -1234
        assert unix(t, 9) == -1_234_567_890

    def test_whole_seconds_floor(self):
        """Test that n=0 is the floored Unix second."""
        t = Instant.from_unix_nanos(-1_500_000_000, timezone=Timezone.utc())
        assert unix(t) == -2

    def test_independent_of_timezone(self, stamp):
        """Test that the timestamp is the same in any timezone."""
        assert unix(stamp.in_timezone(Timezone.from_hours(-8)), 6) == unix(stamp, 6)


class TestFromUnix:
    """Tests for the size-based from_unix heuristic."""

    def test_seconds(self):
        """Test that ten-digit values are seconds."""
        t = from_unix(1_700_000_000, timezone=Timezone.utc())
        assert t.date() == (2023, 11, 14)
        assert t.clock() == (22, 13, 20)

    def test_largest_seconds_value(self):
        """Test the boundary value."""
        t = from_unix(9_999_999_999, timezone=Timezone.utc())
        assert t.year == 2286

    def test_first_nanosecond_value(self):
        """Test that the first eleven-digit value is read as nanoseconds."""
        t = from_unix(10_000_000_000, timezone=Timezone.utc())
        assert t.date() == (1970, 1, 1)
        assert t.clock() == (0, 0, 10)
        assert t.nanosecond == 0

    def test_nanoseconds(self, stamp):
        """Test that larger values are nanoseconds."""
        assert from_unix(1_700_000_000_123_456_789, timezone=Timezone.utc()) == stamp
        assert Instant.from_unix(1_700_000_000_123_456_789) == stamp

    def test_milliseconds_misread(self):
        """Test that millisecond values are read as nanoseconds."""
        t = from_unix(1_700_000_000_000, timezone=Timezone.utc())
        assert t.date() == (1970, 1, 1)
        assert t.clock() == (0, 28, 20)

    def test_negative_is_seconds(self):
        """Test that negative values are seconds."""
        assert from_unix(-86_400, timezone=Timezone.utc()).date() == (1969, 12, 31)

    def test_nanoseconds_logged(self, caplog):
        """Test that the nanosecond reading is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="almanac.navigation.precision"):
            from_unix(1_700_000_000_000, timezone=Timezone.utc())
        assert "nanoseconds" in caplog.text
