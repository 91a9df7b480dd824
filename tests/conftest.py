"""Shared fixtures for the weektime test suite."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from weektime.core.clock import FixedClock
from weektime.core.enums import ChronoField, ChronoUnit, DayOfWeek
from weektime.core.time_of_day import TimeOfDay
from weektime.moment import WeeklyMoment


# ---------------------------------------------------------------------------
# Moments
# ---------------------------------------------------------------------------

@pytest.fixture
def monday_noon() -> WeeklyMoment:
    return WeeklyMoment.of(DayOfWeek.MONDAY, TimeOfDay.NOON)


@pytest.fixture
def friday_ten() -> WeeklyMoment:
    return WeeklyMoment.of(DayOfWeek.FRIDAY, TimeOfDay.of(10))


# ---------------------------------------------------------------------------
# Custom units and fields
# ---------------------------------------------------------------------------

class ShiftUnit:
    """Eight-hour work shift, implemented only through the unit protocol."""

    def is_supported_by(self, temporal):
        return isinstance(temporal, WeeklyMoment)

    def add_to(self, temporal, amount):
        return temporal.plus(amount * 8, ChronoUnit.HOURS)

    def between(self, start, end):
        return start.until(end, ChronoUnit.HOURS) // 8


class MinuteOfWeek:
    """Minutes since Monday 00:00, implemented through the field protocol."""

    def is_supported_by(self, temporal):
        return isinstance(temporal, WeeklyMoment)

    def get_from(self, temporal):
        return (temporal.get(ChronoField.DAY_OF_WEEK) - 1) * 1440 + temporal.get(
            ChronoField.MINUTE_OF_DAY
        )

    def adjust_into(self, temporal, new_value):
        day, minute = divmod(new_value, 1440)
        return temporal.with_field(ChronoField.DAY_OF_WEEK, day + 1).with_field(
            ChronoField.MINUTE_OF_DAY, minute
        )


@pytest.fixture
def shift_unit() -> ShiftUnit:
    return ShiftUnit()


@pytest.fixture
def minute_of_week() -> MinuteOfWeek:
    return MinuteOfWeek()


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to Saturday 2024-06-01 00:00 UTC."""
    return FixedClock(datetime(2024, 6, 1, tzinfo=timezone.utc))
