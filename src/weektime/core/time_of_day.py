"""Time of day with nanosecond resolution and no date or offset.

A ``TimeOfDay`` stores a single integer, the nanosecond of the day, in
``[0, NANOS_PER_DAY)``.  Arithmetic wraps silently at midnight in both
directions; 24:00 is never representable.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Any, ClassVar

from .constants import (
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_MINUTE,
)
from .enums import ChronoField, ChronoUnit
from .errors import ConversionError, InvalidArgumentError, UnsupportedFieldError
from .interfaces import TemporalAccessor, TemporalField, TemporalUnit


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time such as ``10:15:30.000000123``."""

    nano_of_day: int

    MIN: ClassVar[TimeOfDay]
    MAX: ClassVar[TimeOfDay]
    MIDNIGHT: ClassVar[TimeOfDay]
    NOON: ClassVar[TimeOfDay]

    def __post_init__(self) -> None:
        ChronoField.NANO_OF_DAY.check_valid_value(self.nano_of_day)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(
        cls, hour: int = 0, minute: int = 0, second: int = 0, nano: int = 0
    ) -> TimeOfDay:
        ChronoField.HOUR_OF_DAY.check_valid_value(hour)
        ChronoField.MINUTE_OF_HOUR.check_valid_value(minute)
        ChronoField.SECOND_OF_MINUTE.check_valid_value(second)
        ChronoField.NANO_OF_SECOND.check_valid_value(nano)
        return cls(
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nano
        )

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> TimeOfDay:
        return cls(nano_of_day)

    @classmethod
    def of_second_of_day(cls, second_of_day: int) -> TimeOfDay:
        ChronoField.SECOND_OF_DAY.check_valid_value(second_of_day)
        return cls(second_of_day * NANOS_PER_SECOND)

    @classmethod
    def from_time(cls, value: _dt.time) -> TimeOfDay:
        """From a stdlib ``datetime.time``; any tzinfo is ignored."""
        return cls.of(
            value.hour,
            value.minute,
            value.second,
            value.microsecond * NANOS_PER_MICROSECOND,
        )

    @classmethod
    def from_temporal(cls, source: Any) -> TimeOfDay:
        """Extract the time of day from a time, datetime or TemporalAccessor."""
        if isinstance(source, TimeOfDay):
            return source
        if isinstance(source, _dt.datetime):
            return cls.from_time(source.time())
        if isinstance(source, _dt.time):
            return cls.from_time(source)
        if isinstance(source, TemporalAccessor) and source.is_supported(
            ChronoField.NANO_OF_DAY
        ):
            return cls(source.get(ChronoField.NANO_OF_DAY))
        raise ConversionError(
            f"Unable to obtain TimeOfDay from {source!r} "
            f"of type {type(source).__name__}",
            source=source,
        )

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    @property
    def hour(self) -> int:
        return self.nano_of_day // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self.nano_of_day // NANOS_PER_MINUTE) % MINUTES_PER_HOUR

    @property
    def second(self) -> int:
        return (self.nano_of_day // NANOS_PER_SECOND) % SECONDS_PER_MINUTE

    @property
    def nano(self) -> int:
        return self.nano_of_day % NANOS_PER_SECOND

    def to_second_of_day(self) -> int:
        return self.nano_of_day // NANOS_PER_SECOND

    def to_time(self) -> _dt.time:
        """Convert to ``datetime.time``, truncating to microseconds."""
        return _dt.time(
            self.hour, self.minute, self.second, self.nano // NANOS_PER_MICROSECOND
        )

    # ------------------------------------------------------------------
    # Arithmetic (wraps at midnight)
    # ------------------------------------------------------------------

    def plus_nanos(self, nanos: int) -> TimeOfDay:
        if nanos == 0:
            return self
        return TimeOfDay((self.nano_of_day + nanos) % NANOS_PER_DAY)

    def plus_seconds(self, seconds: int) -> TimeOfDay:
        return self.plus_nanos((seconds % SECONDS_PER_DAY) * NANOS_PER_SECOND)

    def plus_minutes(self, minutes: int) -> TimeOfDay:
        return self.plus_nanos((minutes % MINUTES_PER_DAY) * NANOS_PER_MINUTE)

    def plus_hours(self, hours: int) -> TimeOfDay:
        return self.plus_nanos((hours % HOURS_PER_DAY) * NANOS_PER_HOUR)

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def is_supported(self, field: Any) -> bool:
        if isinstance(field, ChronoField):
            return field.is_time_based
        return isinstance(field, TemporalField) and field.is_supported_by(self)

    def is_unit_supported(self, unit: Any) -> bool:
        if isinstance(unit, ChronoUnit):
            return unit.is_time_based
        return isinstance(unit, TemporalUnit) and unit.is_supported_by(self)

    def get(self, field: Any) -> int:
        if not isinstance(field, ChronoField):
            return field.get_from(self)
        if not field.is_time_based:
            raise UnsupportedFieldError(f"Unsupported field: {field.name}")

        hour = self.hour
        if field is ChronoField.NANO_OF_SECOND:
            return self.nano
        if field is ChronoField.NANO_OF_DAY:
            return self.nano_of_day
        if field is ChronoField.MICRO_OF_SECOND:
            return self.nano // NANOS_PER_MICROSECOND
        if field is ChronoField.MICRO_OF_DAY:
            return self.nano_of_day // NANOS_PER_MICROSECOND
        if field is ChronoField.MILLI_OF_SECOND:
            return self.nano // NANOS_PER_MILLISECOND
        if field is ChronoField.MILLI_OF_DAY:
            return self.nano_of_day // NANOS_PER_MILLISECOND
        if field is ChronoField.SECOND_OF_MINUTE:
            return self.second
        if field is ChronoField.SECOND_OF_DAY:
            return self.to_second_of_day()
        if field is ChronoField.MINUTE_OF_HOUR:
            return self.minute
        if field is ChronoField.MINUTE_OF_DAY:
            return hour * MINUTES_PER_HOUR + self.minute
        if field is ChronoField.HOUR_OF_AMPM:
            return hour % 12
        if field is ChronoField.CLOCK_HOUR_OF_AMPM:
            return hour % 12 or 12
        if field is ChronoField.HOUR_OF_DAY:
            return hour
        if field is ChronoField.CLOCK_HOUR_OF_DAY:
            return hour or 24
        # AMPM_OF_DAY
        return hour // 12

    def with_field(self, field: Any, new_value: int) -> TimeOfDay:
        """Copy of this time with ``field`` set to ``new_value``.

        ``*_OF_DAY`` fields replace the whole time, ``*_OF_SECOND`` fields
        replace the fraction of the second, and the AM/PM fields move the
        time by whole hours within the same day.
        """
        if not isinstance(field, ChronoField):
            return field.adjust_into(self, new_value)
        if not field.is_time_based:
            raise UnsupportedFieldError(f"Unsupported field: {field.name}")
        field.check_valid_value(new_value)

        hour = self.hour
        if field is ChronoField.NANO_OF_SECOND:
            return self.with_nano(new_value)
        if field is ChronoField.NANO_OF_DAY:
            return TimeOfDay(new_value)
        if field is ChronoField.MICRO_OF_SECOND:
            return self.with_nano(new_value * NANOS_PER_MICROSECOND)
        if field is ChronoField.MICRO_OF_DAY:
            return TimeOfDay(new_value * NANOS_PER_MICROSECOND)
        if field is ChronoField.MILLI_OF_SECOND:
            return self.with_nano(new_value * NANOS_PER_MILLISECOND)
        if field is ChronoField.MILLI_OF_DAY:
            return TimeOfDay(new_value * NANOS_PER_MILLISECOND)
        if field is ChronoField.SECOND_OF_MINUTE:
            return self.with_second(new_value)
        if field is ChronoField.SECOND_OF_DAY:
            return self.plus_seconds(new_value - self.to_second_of_day())
        if field is ChronoField.MINUTE_OF_HOUR:
            return self.with_minute(new_value)
        if field is ChronoField.MINUTE_OF_DAY:
            return self.plus_minutes(new_value - (hour * MINUTES_PER_HOUR + self.minute))
        if field is ChronoField.HOUR_OF_AMPM:
            return self.plus_hours(new_value - hour % 12)
        if field is ChronoField.CLOCK_HOUR_OF_AMPM:
            return self.plus_hours((0 if new_value == 12 else new_value) - hour % 12)
        if field is ChronoField.HOUR_OF_DAY:
            return self.with_hour(new_value)
        if field is ChronoField.CLOCK_HOUR_OF_DAY:
            return self.with_hour(0 if new_value == 24 else new_value)
        # AMPM_OF_DAY
        return self.plus_hours((new_value - hour // 12) * 12)

    def with_hour(self, hour: int) -> TimeOfDay:
        return TimeOfDay.of(hour, self.minute, self.second, self.nano)

    def with_minute(self, minute: int) -> TimeOfDay:
        return TimeOfDay.of(self.hour, minute, self.second, self.nano)

    def with_second(self, second: int) -> TimeOfDay:
        return TimeOfDay.of(self.hour, self.minute, second, self.nano)

    def with_nano(self, nano: int) -> TimeOfDay:
        return TimeOfDay.of(self.hour, self.minute, self.second, nano)

    def __str__(self) -> str:
        text = f"{self.hour:02d}:{self.minute:02d}"
        second, nano = self.second, self.nano
        if second or nano:
            text += f":{second:02d}"
            if nano and nano % NANOS_PER_MILLISECOND == 0:
                text += f".{nano // NANOS_PER_MILLISECOND:03d}"
            elif nano and nano % NANOS_PER_MICROSECOND == 0:
                text += f".{nano // NANOS_PER_MICROSECOND:06d}"
            elif nano:
                text += f".{nano:09d}"
        return text


TimeOfDay.MIN = TimeOfDay(0)
TimeOfDay.MIDNIGHT = TimeOfDay.MIN
TimeOfDay.NOON = TimeOfDay(12 * NANOS_PER_HOUR)
TimeOfDay.MAX = TimeOfDay(NANOS_PER_DAY - 1)
