"""Tests for start/end period boundaries and week windows."""

import pytest

from almanac import Duration, Instant, Timezone
from almanac.navigation import end, end_week, start, start_week


@pytest.fixture
def jan31():
    """Wednesday 2024-01-31 15:45 UTC."""
    return Instant(2024, 1, 31, 15, 45, timezone=Timezone.utc())


def _is_midnight(t):
    return t.nanos_of_day == 0


def _is_end_of_day(t):
    return t.clock() == (23, 59, 59) and t.nanosecond == 999_999_999


# =============================================================================
# Start Tests
# =============================================================================


class TestStart:
    """Tests for start and its wrappers."""

    def test_no_offsets_is_start_of_year(self, jan31):
        """Test start() with no offsets."""
        t = jan31.start()
        assert t.date() == (2024, 1, 1)
        assert _is_midnight(t)

    def test_year_offset(self, jan31):
        """Test start(y)."""
        assert jan31.start(1).date() == (2025, 1, 1)
        assert jan31.start(-1).date() == (2023, 1, 1)

    def test_month_offset(self, jan31):
        """Test start(y, m)."""
        assert jan31.start(0, 0).date() == (2024, 1, 1)
        assert jan31.start(0, 1).date() == (2024, 2, 1)
        assert jan31.start(0, -1).date() == (2023, 12, 1)
        assert jan31.start(1, 13).date() == (2026, 2, 1)

    def test_day_offset(self, jan31):
        """Test start(y, m, d) adds d to the current day within the target month."""
        assert jan31.start(0, 0, 0).date() == (2024, 1, 31)
        assert jan31.start(0, 1, 0).date() == (2024, 2, 29)
        assert jan31.start(0, 0, -10).date() == (2024, 1, 21)
        assert jan31.start(0, -1, -1).date() == (2023, 12, 30)
        assert _is_midnight(jan31.start(0, 1, 0))

    def test_wrappers(self, jan31):
        """Test start_month and start_day."""
        assert jan31.start_month() == jan31.start(0, 0, 0)
        assert jan31.start_month(1).date() == (2024, 2, 29)
        assert jan31.start_day().date() == (2024, 1, 31)
        assert jan31.start_day(-1).date() == (2024, 1, 30)
        assert jan31.start_day(-30).date() == (2024, 1, 1)

    def test_day_sum_clamped_to_month(self):
        """Test that a day past the month end saturates instead of rolling over."""
        t = Instant(2024, 1, 30, 10, timezone=Timezone.utc())
        assert t.start(0, 0, 5).date() == (2024, 1, 31)
        assert t.start_day(40).date() == (2024, 1, 31)
        assert t.start(0, 1, 1).date() == (2024, 2, 29)
        assert t.start_month(1, 5).date() == (2024, 2, 29)

    def test_day_sum_floored_at_first(self):
        """Test that a day sum below 1 selects the 1st of the month."""
        t = Instant(2024, 3, 10, timezone=Timezone.utc())
        assert t.start_day(-9).date() == (2024, 3, 1)
        assert t.start_day(-40).date() == (2024, 3, 1)
        assert t.start(0, 0, -10).date() == (2024, 3, 1)

    def test_too_many_offsets(self, jan31):
        """Test that a fourth offset is rejected."""
        with pytest.raises(TypeError):
            start(jan31, 1, 2, 3, 4)

    def test_keeps_timezone(self):
        """Test that boundaries are local to the Instant's timezone."""
        tz = Timezone.from_hours(8)
        t = Instant(2024, 1, 1, 5, timezone=tz).start_day()
        assert t.timezone == tz
        assert t.to_utc().date() == (2023, 12, 31)
        assert t.to_utc().hour == 16


# =============================================================================
# End Tests
# =============================================================================


class TestEnd:
    """Tests for end and its wrappers."""

    def test_no_offsets_is_end_of_day(self, jan31):
        """Test end() with no offsets."""
        t = jan31.end()
        assert t.date() == (2024, 1, 31)
        assert _is_end_of_day(t)

    def test_year_offset_clamps(self):
        """Test end(y) from a leap day."""
        t = Instant(2024, 2, 29, 8, timezone=Timezone.utc())
        assert t.end(1).date() == (2025, 2, 28)
        assert _is_end_of_day(t.end(1))

    def test_month_offset(self, jan31):
        """Test end(y, m)."""
        assert jan31.end(0, 1).date() == (2024, 2, 29)
        assert jan31.end(1, -1).date() == (2024, 12, 31)

    def test_day_offset(self, jan31):
        """Test end(y, m, d)."""
        assert jan31.end(0, 0, -1).date() == (2024, 1, 30)
        assert jan31.end(0, 2, -1).date() == (2024, 3, 30)
        assert jan31.end(1, 2, -2).date() == (2025, 3, 29)

    def test_day_sum_clamped_to_month(self, jan31):
        """Test that end does not roll the day into the next month."""
        assert jan31.end(0, 0, 1).date() == (2024, 1, 31)
        assert jan31.end_day(1).date() == (2024, 1, 31)
        assert _is_end_of_day(jan31.end_day(1))
        assert jan31.end_month(1, 3).date() == (2024, 2, 29)
        assert jan31.end_day(-31).date() == (2024, 1, 1)

    def test_wrappers(self, jan31):
        """Test end_month and end_day."""
        assert jan31.end_month().date() == (2024, 1, 31)
        assert jan31.end_month(1).date() == (2024, 2, 29)
        assert jan31.end_day(-1).date() == (2024, 1, 30)
        assert _is_end_of_day(jan31.end_day())

    def test_too_many_offsets(self, jan31):
        """Test that a fourth offset is rejected."""
        with pytest.raises(TypeError):
            end(jan31, 0, 0, 0, 0)

    def test_day_window_contains_instant(self, jan31):
        """Test that start_day() <= t <= end_day() and spans one day."""
        assert jan31.start_day() <= jan31 <= jan31.end_day()
        assert jan31.end_day() - jan31.start_day() == Duration(days=1, nanoseconds=-1)


# =============================================================================
# Week Tests
# =============================================================================


class TestWeek:
    """Tests for start_week and end_week."""

    def test_current_week(self, jan31):
        """Test Monday start and Sunday end."""
        monday = jan31.start_week()
        sunday = jan31.end_week()
        assert monday.date() == (2024, 1, 29)
        assert sunday.date() == (2024, 2, 4)
        assert _is_midnight(monday)
        assert _is_end_of_day(sunday)

    def test_relative_weeks(self, jan31):
        """Test n weeks away."""
        assert jan31.start_week(1).date() == (2024, 2, 5)
        assert jan31.start_week(-1).date() == (2024, 1, 22)
        assert jan31.end_week(-1).date() == (2024, 1, 28)

    def test_sunday_belongs_to_previous_monday(self):
        """Test that Sunday is the last day of its week."""
        sunday = Instant(2024, 3, 3, 18, timezone=Timezone.utc())
        assert sunday.start_week().date() == (2024, 2, 26)
        assert sunday.end_week().date() == (2024, 3, 3)

    def test_crosses_year(self):
        """Test a week spanning New Year."""
        t = Instant(2025, 1, 1, timezone=Timezone.utc())
        assert start_week(t).date() == (2024, 12, 30)
        assert end_week(t).date() == (2025, 1, 5)

    def test_week_shape_every_day(self):
        """Test weekday and span for every day of a year."""
        t = Instant(2024, 1, 1, 12, timezone=Timezone.from_hours(-4))
        span = Duration(days=6, hours=23, minutes=59, seconds=59, nanoseconds=999_999_999)
        for _ in range(366):
            monday = t.start_week()
            sunday = t.end_week()
            assert monday.iso_weekday == 1
            assert sunday.iso_weekday == 7
            assert _is_midnight(monday)
            assert _is_end_of_day(sunday)
            assert sunday - monday == span
            assert monday <= t <= sunday
            t = t.add_day()
