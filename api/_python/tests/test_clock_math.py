"""
Tests for clock-face arithmetic.

Covers "HH:MM" parsing and its failure modes, wrap-around formatting for
any integer offset, and the round trip between the two.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepplan.clock_math import (
    format_time_12h,
    minutes_to_hours,
    minutes_to_time,
    normalize_minutes,
    parse_time_to_minutes,
)
from sleepplan.errors import InvalidTimeFormat, SleepPlanError


class TestParseTimeToMinutes:
    """Tests for parse_time_to_minutes."""

    def test_midnight(self):
        assert parse_time_to_minutes("00:00") == 0

    def test_last_minute_of_day(self):
        assert parse_time_to_minutes("23:59") == 1439

    def test_morning_time(self):
        assert parse_time_to_minutes("07:30") == 450

    @pytest.mark.parametrize(
        "bad",
        ["7:30", "24:00", "12:60", "ab:cd", "", "12-30", "12:3a", "12:300", " 7:30"],
    )
    def test_malformed_strings_rejected(self, bad):
        """Anything but a valid 24-hour HH:MM fails with InvalidTimeFormat."""
        with pytest.raises(InvalidTimeFormat):
            parse_time_to_minutes(bad)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidTimeFormat):
            parse_time_to_minutes(None)

    def test_error_is_a_value_error_with_the_bad_value(self):
        """Callers can catch ValueError; the message names the input."""
        with pytest.raises(ValueError) as exc_info:
            parse_time_to_minutes("25:00")

        assert isinstance(exc_info.value, SleepPlanError)
        assert "25:00" in str(exc_info.value)


class TestMinutesToTime:
    """Tests for minutes_to_time wrap-around formatting."""

    def test_zero_padded(self):
        assert minutes_to_time(65) == "01:05"

    def test_next_day_wraps(self):
        """1440 is midnight of the following day."""
        assert minutes_to_time(1440) == "00:00"
        assert minutes_to_time(1860) == "07:00"

    def test_negative_wraps_to_previous_day(self):
        assert minutes_to_time(-1) == "23:59"
        assert minutes_to_time(-90) == "22:30"

    def test_large_magnitudes(self):
        """Total over all integers, however many days away."""
        assert minutes_to_time(1440 * 1000 + 75) == "01:15"
        assert minutes_to_time(-1440 * 1000 + 5) == "00:05"

    def test_periodic_in_whole_days(self):
        """minutes_to_time(m) == minutes_to_time(m + 1440k)."""
        for m in (-2000, -1, 0, 59, 719, 1439, 5000):
            for k in (-3, -1, 1, 7):
                assert minutes_to_time(m) == minutes_to_time(m + 1440 * k)

    def test_round_trip_every_clock_time(self):
        """minutes_to_time(parse_time_to_minutes(t)) == t for all valid t."""
        for minutes in range(1440):
            t = f"{minutes // 60:02d}:{minutes % 60:02d}"
            assert minutes_to_time(parse_time_to_minutes(t)) == t


class TestHelpers:
    """Tests for the smaller formatting helpers."""

    def test_normalize_minutes_range(self):
        assert normalize_minutes(-1) == 1439
        assert normalize_minutes(1440) == 0
        assert normalize_minutes(2000) == 560

    def test_format_time_12h(self):
        assert format_time_12h(0) == "12:00 AM"
        assert format_time_12h(720) == "12:00 PM"
        assert format_time_12h(780) == "1:00 PM"
        assert format_time_12h(1860) == "7:00 AM"

    def test_minutes_to_hours_rounds_to_one_decimal(self):
        assert minutes_to_hours(480) == 8.0
        assert minutes_to_hours(500) == 8.3
        assert minutes_to_hours(50) == 0.8
