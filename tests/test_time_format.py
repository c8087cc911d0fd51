"""
Tests for time value parsing and rendering.
"""

from __future__ import annotations

from datetime import datetime

from findhelp.application.utils.time_format import (
    DAY_NAMES,
    format_distance,
    format_time,
    minutes_since_midnight,
    schedule_day,
    time_to_minutes,
)
from findhelp.domain.entities.opening_time import (
    ClockTime,
    OpeningTimeSlot,
    PackedTime,
    normalize_opening_time,
    parse_day,
    parse_time_value,
)


def test_packed_time_to_minutes():
    assert time_to_minutes(PackedTime(900)) == 540
    assert time_to_minutes(PackedTime(1700)) == 1020
    assert time_to_minutes(PackedTime(0)) == 0
    assert time_to_minutes(PackedTime(2359)) == 1439
    assert time_to_minutes(PackedTime(30)) == 30


def test_clock_time_to_minutes():
    assert time_to_minutes(ClockTime("09:00")) == 540
    assert time_to_minutes(ClockTime("17:30")) == 1050
    assert time_to_minutes(ClockTime("00:00")) == 0


def test_malformed_clock_time_has_no_minutes():
    assert time_to_minutes(ClockTime("invalid")) is None
    assert time_to_minutes(ClockTime("ab:cd")) is None
    assert time_to_minutes(ClockTime("")) is None


def test_missing_time_counts_as_midnight():
    assert time_to_minutes(None) == 0


def test_format_time():
    assert format_time(PackedTime(900)) == "09:00"
    assert format_time(PackedTime(0)) == "00:00"
    assert format_time(PackedTime(2359)) == "23:59"
    assert format_time(ClockTime("9:30")) == "9:30"
    assert format_time(None) == "N/A"


def test_formatted_time_parses_back_to_same_label():
    """A rendered label read back as a clock string renders identically."""
    for value in (PackedTime(0), PackedTime(930), PackedTime(1700), ClockTime("08:15"), ClockTime("23:59")):
        label = format_time(value)
        reparsed = parse_time_value(label)
        assert format_time(reparsed) == label
        assert time_to_minutes(reparsed) == time_to_minutes(value)


def test_parse_time_value_tags_encodings():
    assert parse_time_value(900) == PackedTime(900)
    assert parse_time_value(900.0) == PackedTime(900)
    assert parse_time_value("09:00") == ClockTime("09:00")
    assert parse_time_value(None) is None
    assert parse_time_value(True) is None
    assert parse_time_value({"h": 9}) is None


def test_parse_day():
    assert parse_day(0) == 0
    assert parse_day("6") == 6
    assert parse_day(3.0) == 3
    assert parse_day(7) is None
    assert parse_day(-1) is None
    assert parse_day("monday") is None
    assert parse_day(None) is None
    assert parse_day(2.5) is None


def test_normalize_mixed_slot():
    slot = normalize_opening_time(OpeningTimeSlot(day="1", start="09:00", end=1700))
    assert slot.day == 1
    assert slot.start == ClockTime("09:00")
    assert slot.end == PackedTime(1700)


def test_schedule_day_is_monday_origin():
    assert schedule_day(datetime(2024, 1, 15, 12, 0)) == 0  # Monday
    assert schedule_day(datetime(2024, 1, 16, 12, 0)) == 1  # Tuesday
    assert schedule_day(datetime(2024, 1, 21, 12, 0)) == 6  # Sunday
    assert DAY_NAMES[schedule_day(datetime(2024, 1, 21, 12, 0))] == "Sunday"


def test_minutes_since_midnight():
    assert minutes_since_midnight(datetime(2024, 1, 15, 14, 30, 59)) == 870


def test_format_distance():
    assert format_distance(0.5) == "0.5 km away"
    assert format_distance(1.0) == "1.0 km away"
    assert format_distance(0) == "0.0 km away"
    assert format_distance(10.5) == "10.5 km away"
    assert format_distance(None) == ""


def test_parse_day_rejects_non_finite_numbers():
    assert parse_day(float("inf")) is None
    assert parse_day(float("-inf")) is None
    assert parse_day(float("nan")) is None
