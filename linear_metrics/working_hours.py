"""Working hours calendar for Linear Metrics.

This module answers two questions about a fixed business calendar: whether an
instant falls inside business hours, and how many business hours lie between
two instants. Business hours are 09:00 to 17:00 on every weekday; Saturdays
and Sundays are excluded. There is no holiday support.

Instants are `pandas.Timestamp` values. Invalid instants (`NaT`, `None` or
anything that does not parse) never raise: they produce a zero duration.
"""

import datetime
import logging

import pandas as pd

logger = logging.getLogger(__name__)

WORK_START_HOUR = 9
WORK_END_HOUR = 17

# pandas dayofweek: Monday=0 ... Saturday=5, Sunday=6
WEEKEND_DAYS = (5, 6)

SECONDS_PER_HOUR = 60 * 60


def to_instant(value):
    """Convert `value` to a `pandas.Timestamp`, or `NaT` if it is not one."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return pd.NaT
    if isinstance(value, pd.Timestamp):
        return value
    try:
        instant = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return pd.NaT
    if not isinstance(instant, pd.Timestamp):
        return pd.NaT
    return instant


def is_valid_instant(value):
    """True if `value` converts to a usable timestamp."""
    return not pd.isna(to_instant(value))


def is_weekend(instant):
    """True if `instant` falls on a Saturday or Sunday."""
    return instant.dayofweek in WEEKEND_DAYS


def is_business_time(instant):
    """True if `instant` lies inside the weekday 09:00-17:00 window."""
    instant = to_instant(instant)
    if pd.isna(instant) or is_weekend(instant):
        return False
    return WORK_START_HOUR <= instant.hour < WORK_END_HOUR


def at_hour(instant, hour):
    """The same calendar date as `instant`, at `hour`:00:00 exactly."""
    return instant.replace(hour=hour, minute=0, second=0, microsecond=0, nanosecond=0)


def next_day_at_hour(instant, hour):
    """The next calendar date after `instant`, at `hour`:00:00 exactly."""
    next_date = instant.date() + datetime.timedelta(days=1)
    return at_hour(instant, hour).replace(
        year=next_date.year, month=next_date.month, day=next_date.day
    )


def comparable_instants(start, end):
    """True if `start` and `end` are both naive or both timezone-aware."""
    return (start.tzinfo is None) == (end.tzinfo is None)


def measurable_range(start, end):
    """True when `start` and `end` form a range that can be measured.

    Both instants must be valid, both naive or both timezone-aware, and `end`
    must not come before `start`. `business_hours_between` returns 0 for any
    range where this is False; callers can use it to tell a genuine zero
    duration from bad data.
    """
    start = to_instant(start)
    end = to_instant(end)
    if pd.isna(start) or pd.isna(end):
        return False
    if not comparable_instants(start, end):
        return False
    return not end < start


def business_hours_between(start, end):
    """Number of business hours between `start` and `end`, as a float.

    The start is moved forward to the next opening of the business window if
    it falls outside it, the end is clamped into its own day's window, and the
    range is then walked one calendar day at a time, adding the part of each
    weekday's 09:00-17:00 window that overlaps the range.

    Returns 0 for invalid instants and for ranges where `end` is before
    `start`.
    """
    start = to_instant(start)
    end = to_instant(end)

    if not measurable_range(start, end):
        if not pd.isna(start) and not pd.isna(end) and not comparable_instants(start, end):
            logger.debug(
                "Cannot compare timezone-aware and naive timestamps %s and %s",
                start,
                end,
            )
        return 0

    current = start
    if current.hour < WORK_START_HOUR:
        current = at_hour(current, WORK_START_HOUR)
    elif current.hour >= WORK_END_HOUR:
        current = next_day_at_hour(current, WORK_START_HOUR)

    if end.hour > WORK_END_HOUR:
        end = at_hour(end, WORK_END_HOUR)
    elif end.hour < WORK_START_HOUR:
        end = at_hour(end, WORK_START_HOUR)

    total = pd.Timedelta(0)
    while current < end:
        if not is_weekend(current):
            day_start = at_hour(current, WORK_START_HOUR)
            day_end = at_hour(current, WORK_END_HOUR)

            interval_start = max(current, day_start)
            interval_end = min(end, day_end)

            if interval_end > interval_start:
                total += interval_end - interval_start

        current = next_day_at_hour(current, WORK_START_HOUR)

    return total.total_seconds() / SECONDS_PER_HOUR
