"""Tests for the working hours calendar in Linear Metrics."""

import datetime

import pytest
from pandas import NaT, Timestamp

from .working_hours import (
    business_hours_between,
    is_business_time,
    is_valid_instant,
    is_weekend,
    measurable_range,
    next_day_at_hour,
    to_instant,
)

# 2024-01-01 is a Monday


def test_to_instant():
    """Test to_instant parses what it can and returns NaT otherwise."""
    assert to_instant("2024-01-01 10:30") == Timestamp(2024, 1, 1, 10, 30)
    assert to_instant(datetime.datetime(2024, 1, 1, 10, 30)) == Timestamp(2024, 1, 1, 10, 30)
    assert to_instant(Timestamp(2024, 1, 1)) == Timestamp(2024, 1, 1)
    assert to_instant(None) is NaT
    assert to_instant("") is NaT
    assert to_instant("   ") is NaT
    assert to_instant("not a date") is NaT


def test_is_valid_instant():
    """Test is_valid_instant functionality."""
    assert is_valid_instant("2024-01-01T09:00:00.000Z")
    assert not is_valid_instant(NaT)
    assert not is_valid_instant(None)
    assert not is_valid_instant("yesterday-ish")


def test_is_weekend():
    """Test is_weekend excludes Saturday and Sunday only."""
    assert not is_weekend(Timestamp(2024, 1, 1))  # Monday
    assert not is_weekend(Timestamp(2024, 1, 5))  # Friday
    assert is_weekend(Timestamp(2024, 1, 6))  # Saturday
    assert is_weekend(Timestamp(2024, 1, 7))  # Sunday


def test_is_business_time():
    """Test is_business_time window edges."""
    assert is_business_time(Timestamp(2024, 1, 1, 9, 0))
    assert is_business_time(Timestamp(2024, 1, 1, 16, 59, 59))
    assert not is_business_time(Timestamp(2024, 1, 1, 8, 59))
    assert not is_business_time(Timestamp(2024, 1, 1, 17, 0))
    assert not is_business_time(Timestamp(2024, 1, 6, 10, 0))
    assert not is_business_time(None)


def test_next_day_at_hour_crosses_month_and_year():
    """Test next_day_at_hour moves to the next calendar date."""
    assert next_day_at_hour(Timestamp(2024, 1, 31, 18, 30, 12), 9) == Timestamp(2024, 2, 1, 9)
    assert next_day_at_hour(Timestamp(2021, 12, 31, 16), 9) == Timestamp(2022, 1, 1, 9)


def test_measurable_range():
    """Test measurable_range distinguishes bad ranges from empty ones."""
    assert measurable_range("2024-01-01 10:00", "2024-01-01 10:00")
    assert measurable_range("2024-01-06 10:00", "2024-01-06 14:00")
    assert not measurable_range("2024-01-01 11:00", "2024-01-01 10:00")
    assert not measurable_range(None, "2024-01-01 10:00")
    assert not measurable_range("2024-01-01 10:00Z", "2024-01-01 11:00")


def test_same_instant_is_zero():
    """Test a range from an instant to itself has no duration."""
    instant = Timestamp(2024, 1, 2, 11, 17)
    assert business_hours_between(instant, instant) == 0


def test_inverted_range_is_zero():
    """Test an end before the start yields zero, not a negative duration."""
    assert business_hours_between(Timestamp(2024, 1, 3, 12), Timestamp(2024, 1, 2, 12)) == 0


@pytest.mark.parametrize(
    "start, end",
    [
        (None, Timestamp(2024, 1, 1, 12)),
        (Timestamp(2024, 1, 1, 12), None),
        (NaT, NaT),
        ("", "2024-01-01 12:00"),
        ("garbage", "2024-01-01 12:00"),
    ],
)
def test_invalid_instants_are_zero(start, end):
    """Test invalid instants never raise and yield zero."""
    assert business_hours_between(start, end) == 0


def test_mixed_timezone_awareness_is_zero():
    """Test naive and timezone-aware instants cannot be compared."""
    assert business_hours_between("2024-01-01T10:00:00Z", "2024-01-01 12:00") == 0


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("2024-01-01 09:00", "2024-01-01 17:00", 8.0),
        ("2024-01-01 10:00", "2024-01-01 11:30", 1.5),
        ("2024-01-02 09:15", "2024-01-02 09:45", 0.5),
        ("2024-01-05 13:00", "2024-01-05 16:20", 3 + 1 / 3),
    ],
)
def test_span_within_one_business_day(start, end, expected):
    """Test a span inside one weekday window is the plain difference."""
    assert business_hours_between(start, end) == pytest.approx(expected)
    assert business_hours_between(start, end) == pytest.approx(
        (Timestamp(end) - Timestamp(start)).total_seconds() / 3600
    )


def test_weekend_span_is_zero():
    """Test a span entirely on a Saturday counts nothing."""
    assert business_hours_between(Timestamp(2024, 1, 6, 10), Timestamp(2024, 1, 6, 14)) == 0


def test_friday_afternoon_to_monday_morning():
    """Test Friday 16:00 to Monday 10:00 is one hour each side of the weekend."""
    assert business_hours_between(Timestamp(2024, 1, 5, 16), Timestamp(2024, 1, 8, 10)) == 2.0


def test_full_day_is_clipped_to_window():
    """Test Monday 08:00 to Monday 18:00 is exactly one business day."""
    assert business_hours_between(Timestamp(2024, 1, 1, 8), Timestamp(2024, 1, 1, 18)) == 8.0


def test_start_after_hours_moves_to_next_morning():
    """Test a start at or after 17:00 begins at 09:00 the next day."""
    assert business_hours_between(Timestamp(2024, 1, 1, 17), Timestamp(2024, 1, 2, 12)) == 3.0
    assert business_hours_between(Timestamp(2024, 1, 1, 17, 30), Timestamp(2024, 1, 2, 12)) == 3.0


def test_start_friday_evening_skips_weekend():
    """Test a start after hours on Friday first counts on Monday."""
    assert business_hours_between(Timestamp(2024, 1, 5, 18), Timestamp(2024, 1, 8, 10)) == 1.0


def test_end_before_opening_is_moved_to_opening():
    """Test an end before 09:00 counts nothing for that day."""
    assert business_hours_between(Timestamp(2024, 1, 1, 10), Timestamp(2024, 1, 2, 8)) == 7.0


def test_range_outside_hours_on_one_evening_is_zero():
    """Test a range entirely after hours on the same day is zero."""
    assert business_hours_between(Timestamp(2024, 1, 1, 18), Timestamp(2024, 1, 1, 19)) == 0
    assert business_hours_between(Timestamp(2024, 1, 1, 7), Timestamp(2024, 1, 1, 8)) == 0


def test_two_full_weeks():
    """Test two weeks from Monday opening to Monday opening."""
    assert business_hours_between(Timestamp(2024, 1, 1, 9), Timestamp(2024, 1, 15, 9)) == 80.0


def test_crosses_month_and_year_boundaries():
    """Test the day-by-day walk across month and year ends."""
    assert business_hours_between(Timestamp(2024, 1, 31, 16), Timestamp(2024, 2, 1, 10)) == 2.0
    assert business_hours_between(Timestamp(2021, 12, 31, 16), Timestamp(2022, 1, 3, 10)) == 2.0


def test_fractional_hours_are_kept():
    """Test durations are not rounded."""
    assert business_hours_between(
        Timestamp(2024, 1, 1, 16, 59, 30), Timestamp(2024, 1, 2, 9, 0, 45)
    ) == pytest.approx((30 + 45) / 3600)


def test_timezone_aware_instants():
    """Test instants with the same offset are measured in that offset."""
    assert business_hours_between("2024-01-01T10:00:00.000Z", "2024-01-01T12:30:00.000Z") == 2.5
    assert business_hours_between("2024-01-05T16:00:00+01:00", "2024-01-08T10:00:00+01:00") == 2.0
