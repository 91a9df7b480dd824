"""WeeklyMoment: a day of the week combined with a time of day.

A weekly moment has no date and no offset, e.g. ``FRIDAY@10:00``.  It
repeats every seven days, so arithmetic wraps across midnight and across
the end of the week, and :meth:`WeeklyMoment.until` always measures
forward to the *next* occurrence of the target.

Typical use::

    opening = WeeklyMoment.of(DayOfWeek.MONDAY, TimeOfDay.of(9, 30))
    closing = opening.plus(8, ChronoUnit.HOURS)
    opening.until(closing, ChronoUnit.MINUTES)   # 480
"""

from __future__ import annotations

import datetime as _dt
import logging
from dataclasses import dataclass
from typing import Any

from .core.clock import IClock, WallClock
from .core.constants import LONG_MAX, LONG_MIN, NANOS_PER_MICROSECOND
from .core.distance import forward_distance
from .core.enums import ChronoField, ChronoUnit, DayOfWeek
from .core.errors import (
    ConversionError,
    InvalidArgumentError,
    UnsupportedTemporalTypeError,
)
from .core.interfaces import TemporalField, TemporalUnit
from .core.time_of_day import TimeOfDay
from .core.units import SUPPORTED_UNITS, check_amount, resolve_unit, shift

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class WeeklyMoment:
    """Immutable (day-of-week, time-of-day) pair.

    Ordered by day first (MONDAY lowest), then by time of day.
    """

    day_of_week: DayOfWeek
    time_of_day: TimeOfDay

    def __post_init__(self) -> None:
        if self.day_of_week is None:
            raise InvalidArgumentError("Day of week must not be None.")
        if self.time_of_day is None:
            raise InvalidArgumentError("Time of day must not be None.")
        if not isinstance(self.day_of_week, DayOfWeek):
            raise InvalidArgumentError(
                f"Expected a DayOfWeek, got {type(self.day_of_week).__name__}"
            )
        if not isinstance(self.time_of_day, TimeOfDay):
            raise InvalidArgumentError(
                f"Expected a TimeOfDay, got {type(self.time_of_day).__name__}"
            )

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, day_of_week: DayOfWeek, time_of_day: TimeOfDay) -> WeeklyMoment:
        return cls(day_of_week, time_of_day)

    @classmethod
    def from_temporal(cls, source: Any) -> WeeklyMoment:
        """Extract a weekly moment from any source exposing a day and a time.

        Accepts another WeeklyMoment, a ``datetime.datetime`` or any
        TemporalAccessor supporting DAY_OF_WEEK and NANO_OF_DAY.  Failure to
        obtain either part raises a single ConversionError naming the source.
        """
        if source is None:
            raise InvalidArgumentError("Temporal source must not be None.")
        if isinstance(source, WeeklyMoment):
            return source
        try:
            day = DayOfWeek.from_temporal(source)
            time = TimeOfDay.from_temporal(source)
        except (ConversionError, InvalidArgumentError, UnsupportedTemporalTypeError) as exc:
            logger.debug("Conversion of %s failed: %s", type(source).__name__, exc)
            raise ConversionError(
                f"Unable to obtain WeeklyMoment from {source!r} "
                f"of type {type(source).__name__}",
                source=source,
            ) from exc
        return cls(day, time)

    @classmethod
    def now(cls, clock: IClock | None = None) -> WeeklyMoment:
        """Current weekly moment according to ``clock`` (UTC wall clock by default)."""
        return cls.from_temporal((clock or WallClock()).now())

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    @property
    def hour(self) -> int:
        return self.time_of_day.hour

    @property
    def minute(self) -> int:
        return self.time_of_day.minute

    @property
    def second(self) -> int:
        return self.time_of_day.second

    @property
    def nano(self) -> int:
        return self.time_of_day.nano

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def is_supported(self, field: Any) -> bool:
        if isinstance(field, ChronoField):
            return field is ChronoField.DAY_OF_WEEK or field.is_time_based
        return isinstance(field, TemporalField) and field.is_supported_by(self)

    def is_unit_supported(self, unit: Any) -> bool:
        """Whether :meth:`plus` and :meth:`until` accept ``unit``."""
        if isinstance(unit, ChronoUnit):
            return unit in SUPPORTED_UNITS
        return isinstance(unit, TemporalUnit) and unit.is_supported_by(self)

    def get(self, field: Any) -> int:
        if isinstance(field, ChronoField):
            if field is ChronoField.DAY_OF_WEEK:
                return self.day_of_week.value
            return self.time_of_day.get(field)
        return _custom_field(field).get_from(self)

    def with_field(self, field: Any, new_value: int) -> WeeklyMoment:
        if isinstance(field, ChronoField):
            if field is ChronoField.DAY_OF_WEEK:
                return WeeklyMoment(DayOfWeek.of(new_value), self.time_of_day)
            return WeeklyMoment(
                self.day_of_week, self.time_of_day.with_field(field, new_value)
            )
        return _custom_field(field).adjust_into(self, new_value)

    def with_day_of_week(self, day_of_week: DayOfWeek) -> WeeklyMoment:
        return WeeklyMoment(day_of_week, self.time_of_day)

    def with_time_of_day(self, time_of_day: TimeOfDay) -> WeeklyMoment:
        return WeeklyMoment(self.day_of_week, time_of_day)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(self, amount: int, unit: Any) -> WeeklyMoment:
        """Copy shifted by ``amount`` units (negative moves backwards).

        Supports NANOS through DAYS; larger built-in units raise
        UnsupportedUnitError.  Custom units are asked to add themselves.
        """
        builtin = resolve_unit(unit)
        if builtin is None:
            return unit.add_to(self, amount)
        day, time = shift(self.day_of_week, self.time_of_day, amount, builtin)
        return WeeklyMoment(day, time)

    def minus(self, amount: int, unit: Any) -> WeeklyMoment:
        check_amount(amount)
        if amount == LONG_MIN:
            # -LONG_MIN does not fit in 64 bits.
            return self.plus(LONG_MAX, unit).plus(1, unit)
        return self.plus(-amount, unit)

    def until(self, end: Any, unit: Any) -> int:
        """Whole units from this moment forward to the next occurrence of ``end``.

        Never negative: ``FRIDAY@10:00`` until ``MONDAY@10:00`` is 3 days.
        ``end`` may be anything :meth:`from_temporal` accepts.
        """
        end_moment = WeeklyMoment.from_temporal(end)
        builtin = resolve_unit(unit)
        if builtin is None:
            return unit.between(self, end_moment)
        return forward_distance(self, end_moment, builtin)

    # ------------------------------------------------------------------
    # Adjusting other values
    # ------------------------------------------------------------------

    def adjust_into(self, value: _dt.datetime) -> _dt.datetime:
        """Move ``value`` to this day (same Monday-based week) and time.

        The nanosecond part is truncated to microseconds; tzinfo is kept.
        """
        if not isinstance(value, _dt.datetime):
            raise InvalidArgumentError(
                f"Can only adjust a datetime, got {type(value).__name__}"
            )
        moved = value + _dt.timedelta(days=self.day_of_week.value - value.isoweekday())
        return moved.replace(
            hour=self.hour,
            minute=self.minute,
            second=self.second,
            microsecond=self.nano // NANOS_PER_MICROSECOND,
        )

    # ------------------------------------------------------------------
    # Comparison and rendering
    # ------------------------------------------------------------------

    def compare_to(self, other: WeeklyMoment) -> int:
        if self == other:
            return 0
        return -1 if self < other else 1

    def __str__(self) -> str:
        return f"{self.day_of_week.name}@{self.time_of_day}"


def _custom_field(field: Any) -> TemporalField:
    if not isinstance(field, TemporalField):
        raise InvalidArgumentError(f"Not a temporal field: {field!r}")
    logger.debug("Delegating to custom field %r", field)
    return field
