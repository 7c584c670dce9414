# ==============================================================================
# Tests for Duration Validation and Parsing
# ==============================================================================
"""
Unit tests for millisecond conversion and duration string parsing.

Tests cover:
- timedelta and int inputs converted to milliseconds
- Sub-millisecond, out-of-range and non-duration inputs rejected
- Duration strings with ms/s/m/h/d units
"""

from datetime import timedelta

import pytest

from sessionwindows.core.durations import (
    MAX_MILLIS,
    MIN_MILLIS,
    parse_duration,
    validate_millisecond_duration,
)
from sessionwindows.core.errors import InvalidArgument


# ==============================================================================
# validate_millisecond_duration
# ==============================================================================


class TestValidateMillisecondDuration:
    """Tests for conversion to whole milliseconds."""

    def test_timedelta(self):
        assert validate_millisecond_duration(timedelta(seconds=1, milliseconds=5), "gap") == 1005

    def test_negative_timedelta(self):
        """Negative values convert; sign checks happen elsewhere."""
        assert validate_millisecond_duration(timedelta(milliseconds=-5), "grace") == -5

    def test_days(self):
        assert validate_millisecond_duration(timedelta(days=2), "gap") == 172_800_000

    def test_int_is_milliseconds(self):
        assert validate_millisecond_duration(250, "gap") == 250

    def test_int_bounds(self):
        assert validate_millisecond_duration(MAX_MILLIS, "gap") == MAX_MILLIS
        assert validate_millisecond_duration(MIN_MILLIS, "gap") == MIN_MILLIS

    def test_int_overflow_rejected(self):
        with pytest.raises(InvalidArgument, match="out of range"):
            validate_millisecond_duration(MAX_MILLIS + 1, "gap")
        with pytest.raises(InvalidArgument, match="out of range"):
            validate_millisecond_duration(MIN_MILLIS - 1, "gap")

    def test_sub_millisecond_remainder_rejected(self):
        with pytest.raises(InvalidArgument, match="whole milliseconds"):
            validate_millisecond_duration(timedelta(microseconds=1), "gap")

    def test_negative_sub_millisecond_remainder_rejected(self):
        with pytest.raises(InvalidArgument, match="whole milliseconds"):
            validate_millisecond_duration(timedelta(microseconds=-1500), "grace")

    @pytest.mark.parametrize("value", [True, 1.5, "5ms", None])
    def test_non_duration_rejected(self, value):
        with pytest.raises(InvalidArgument, match="Expected a timedelta") as exc_info:
            validate_millisecond_duration(value, "max_span")
        assert exc_info.value.parameter == "max_span"
        assert exc_info.value.value is value

    def test_message_shows_timedelta_in_seconds(self):
        with pytest.raises(InvalidArgument) as exc_info:
            validate_millisecond_duration(timedelta(microseconds=1500), "grace")
        assert '"grace" (value was: 0.0015s)' in str(exc_info.value)


# ==============================================================================
# parse_duration
# ==============================================================================


class TestParseDuration:
    """Tests for the duration string parser."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("250ms", timedelta(milliseconds=250)),
            ("30s", timedelta(seconds=30)),
            ("5m", timedelta(minutes=5)),
            ("1h", timedelta(hours=1)),
            ("2d", timedelta(days=2)),
            ("0ms", timedelta(0)),
        ],
    )
    def test_units(self, text, expected):
        assert parse_duration(text) == expected

    def test_uppercase(self):
        """Parser is case-insensitive."""
        assert parse_duration("2M") == timedelta(minutes=2)
        assert parse_duration("10MS") == timedelta(milliseconds=10)

    def test_negative(self):
        assert parse_duration("-5s") == timedelta(seconds=-5)

    def test_surrounding_whitespace(self):
        assert parse_duration(" 5m ") == timedelta(minutes=5)

    @pytest.mark.parametrize("text", ["5x", "100", "", "m5", "1.5s"])
    def test_invalid_format_raises(self, text):
        with pytest.raises(ValueError, match="Invalid duration format"):
            parse_duration(text)

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_duration("9999999999d")
