"""Forward distance between two weekly moments on the seven-day cycle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import NANOS_PER_DAY, NANOS_PER_WEEK
from .enums import ChronoUnit
from .units import nanos_per_unit

if TYPE_CHECKING:
    from ..moment import WeeklyMoment


def forward_nanos(start: WeeklyMoment, end: WeeklyMoment) -> int:
    """Nanoseconds to advance from ``start`` until ``end`` next occurs.

    Always in ``[0, NANOS_PER_WEEK)``; zero when the moments are equal.
    """
    raw = (
        (end.day_of_week.value - start.day_of_week.value) * NANOS_PER_DAY
        + end.time_of_day.nano_of_day
        - start.time_of_day.nano_of_day
    )
    return ((raw % NANOS_PER_WEEK) + NANOS_PER_WEEK) % NANOS_PER_WEEK


def forward_distance(start: WeeklyMoment, end: WeeklyMoment, unit: ChronoUnit) -> int:
    """Whole ``unit``s from ``start`` forward to ``end``, truncated."""
    return forward_nanos(start, end) // nanos_per_unit(unit)
