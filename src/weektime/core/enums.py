"""Enumerations for days of the week and the built-in units and fields."""

from __future__ import annotations

import datetime as _dt
from enum import Enum, IntEnum
from typing import Any

from .constants import (
    DAYS_PER_WEEK,
    MINUTES_PER_DAY,
    NANOS_PER_DAY,
    SECONDS_PER_DAY,
)
from .errors import ConversionError, InvalidArgumentError, UnsupportedFieldError


class DayOfWeek(IntEnum):
    """ISO day of week: MONDAY=1 .. SUNDAY=7."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def __str__(self) -> str:
        return self.name

    @classmethod
    def of(cls, value: int) -> DayOfWeek:
        """Day from its ISO ordinal. Raises InvalidArgumentError outside 1-7."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"Invalid day-of-week ordinal: {value!r}")
        if not 1 <= value <= DAYS_PER_WEEK:
            raise InvalidArgumentError(
                f"Invalid value for DayOfWeek (valid values 1 - 7): {value}"
            )
        return cls(value)

    @classmethod
    def from_name(cls, name: str) -> DayOfWeek:
        """Day from a case-insensitive English name or 3-letter abbreviation."""
        key = name.strip().upper()
        for day in cls:
            if key in (day.name, day.name[:3]):
                return day
        raise InvalidArgumentError(f"Unknown day of week: {name!r}")

    @classmethod
    def from_temporal(cls, source: Any) -> DayOfWeek:
        """Extract the day of week from a date, datetime or TemporalAccessor."""
        from .interfaces import TemporalAccessor

        if isinstance(source, DayOfWeek):
            return source
        if isinstance(source, _dt.date):
            return cls(source.isoweekday())
        if isinstance(source, TemporalAccessor) and source.is_supported(
            ChronoField.DAY_OF_WEEK
        ):
            return cls.of(source.get(ChronoField.DAY_OF_WEEK))
        raise ConversionError(
            f"Unable to obtain DayOfWeek from {source!r} "
            f"of type {type(source).__name__}",
            source=source,
        )

    def plus(self, days: int) -> DayOfWeek:
        """Day ``days`` after this one, wrapping in either direction."""
        return DayOfWeek((self.value - 1 + days) % DAYS_PER_WEEK + 1)

    def minus(self, days: int) -> DayOfWeek:
        return self.plus(-days)


class ChronoUnit(str, Enum):
    """Built-in units of time."""

    NANOS = "nanos"
    MICROS = "micros"
    MILLIS = "millis"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    HALF_DAYS = "half_days"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"
    DECADES = "decades"
    CENTURIES = "centuries"
    MILLENNIA = "millennia"
    ERAS = "eras"
    FOREVER = "forever"

    @property
    def is_time_based(self) -> bool:
        return self in _TIME_BASED_UNITS

    @property
    def is_date_based(self) -> bool:
        return not self.is_time_based and self is not ChronoUnit.FOREVER

    # Capability methods: built-in units route back to the temporal.

    def is_supported_by(self, temporal: Any) -> bool:
        return temporal.is_unit_supported(self)

    def add_to(self, temporal: Any, amount: int) -> Any:
        return temporal.plus(amount, self)

    def between(self, start: Any, end: Any) -> int:
        return start.until(end, self)


_TIME_BASED_UNITS = frozenset({
    ChronoUnit.NANOS,
    ChronoUnit.MICROS,
    ChronoUnit.MILLIS,
    ChronoUnit.SECONDS,
    ChronoUnit.MINUTES,
    ChronoUnit.HOURS,
    ChronoUnit.HALF_DAYS,
})


class ChronoField(str, Enum):
    """Built-in fields readable from (and writable to) temporal values."""

    NANO_OF_SECOND = "nano_of_second"
    NANO_OF_DAY = "nano_of_day"
    MICRO_OF_SECOND = "micro_of_second"
    MICRO_OF_DAY = "micro_of_day"
    MILLI_OF_SECOND = "milli_of_second"
    MILLI_OF_DAY = "milli_of_day"
    SECOND_OF_MINUTE = "second_of_minute"
    SECOND_OF_DAY = "second_of_day"
    MINUTE_OF_HOUR = "minute_of_hour"
    MINUTE_OF_DAY = "minute_of_day"
    HOUR_OF_AMPM = "hour_of_ampm"
    CLOCK_HOUR_OF_AMPM = "clock_hour_of_ampm"
    HOUR_OF_DAY = "hour_of_day"
    CLOCK_HOUR_OF_DAY = "clock_hour_of_day"
    AMPM_OF_DAY = "ampm_of_day"
    DAY_OF_WEEK = "day_of_week"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    MONTH_OF_YEAR = "month_of_year"
    YEAR = "year"
    EPOCH_DAY = "epoch_day"

    @property
    def value_range(self) -> tuple[int, int]:
        """Inclusive (minimum, maximum) of valid values."""
        return _FIELD_RANGES[self]

    @property
    def is_time_based(self) -> bool:
        return self in _TIME_BASED_FIELDS

    @property
    def is_date_based(self) -> bool:
        return not self.is_time_based

    def check_valid_value(self, value: int) -> int:
        """Return ``value`` unchanged, or raise InvalidArgumentError."""
        low, high = self.value_range
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"Invalid value for {self.name}: {value!r}")
        if not low <= value <= high:
            raise InvalidArgumentError(
                f"Invalid value for {self.name} (valid values {low} - {high}): {value}"
            )
        return value

    # Capability methods: built-in fields route back to the temporal.

    def is_supported_by(self, temporal: Any) -> bool:
        return temporal.is_supported(self)

    def get_from(self, temporal: Any) -> int:
        if not temporal.is_supported(self):
            raise UnsupportedFieldError(f"Unsupported field: {self.name}")
        return temporal.get(self)

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        return temporal.with_field(self, new_value)


_FIELD_RANGES: dict[ChronoField, tuple[int, int]] = {
    ChronoField.NANO_OF_SECOND: (0, 999_999_999),
    ChronoField.NANO_OF_DAY: (0, NANOS_PER_DAY - 1),
    ChronoField.MICRO_OF_SECOND: (0, 999_999),
    ChronoField.MICRO_OF_DAY: (0, NANOS_PER_DAY // 1_000 - 1),
    ChronoField.MILLI_OF_SECOND: (0, 999),
    ChronoField.MILLI_OF_DAY: (0, NANOS_PER_DAY // 1_000_000 - 1),
    ChronoField.SECOND_OF_MINUTE: (0, 59),
    ChronoField.SECOND_OF_DAY: (0, SECONDS_PER_DAY - 1),
    ChronoField.MINUTE_OF_HOUR: (0, 59),
    ChronoField.MINUTE_OF_DAY: (0, MINUTES_PER_DAY - 1),
    ChronoField.HOUR_OF_AMPM: (0, 11),
    ChronoField.CLOCK_HOUR_OF_AMPM: (1, 12),
    ChronoField.HOUR_OF_DAY: (0, 23),
    ChronoField.CLOCK_HOUR_OF_DAY: (1, 24),
    ChronoField.AMPM_OF_DAY: (0, 1),
    ChronoField.DAY_OF_WEEK: (1, 7),
    ChronoField.DAY_OF_MONTH: (1, 31),
    ChronoField.DAY_OF_YEAR: (1, 366),
    ChronoField.MONTH_OF_YEAR: (1, 12),
    ChronoField.YEAR: (-999_999_999, 999_999_999),
    ChronoField.EPOCH_DAY: (-365_243_219_162, 365_241_780_471),
}

_TIME_BASED_FIELDS = frozenset({
    ChronoField.NANO_OF_SECOND,
    ChronoField.NANO_OF_DAY,
    ChronoField.MICRO_OF_SECOND,
    ChronoField.MICRO_OF_DAY,
    ChronoField.MILLI_OF_SECOND,
    ChronoField.MILLI_OF_DAY,
    ChronoField.SECOND_OF_MINUTE,
    ChronoField.SECOND_OF_DAY,
    ChronoField.MINUTE_OF_HOUR,
    ChronoField.MINUTE_OF_DAY,
    ChronoField.HOUR_OF_AMPM,
    ChronoField.CLOCK_HOUR_OF_AMPM,
    ChronoField.HOUR_OF_DAY,
    ChronoField.CLOCK_HOUR_OF_DAY,
    ChronoField.AMPM_OF_DAY,
})
