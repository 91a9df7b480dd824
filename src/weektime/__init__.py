"""Weekly moments: a day of the week plus a time of day, with cyclic arithmetic.

Public API
----------
::

    from weektime import (
        WeeklyMoment,
        DayOfWeek,
        TimeOfDay,
        ChronoUnit,
        ChronoField,
    )
"""

from __future__ import annotations

from weektime.core.enums import ChronoField, ChronoUnit, DayOfWeek
from weektime.core.errors import (
    ArithmeticOverflowError,
    ConfigError,
    ConversionError,
    InvalidArgumentError,
    UnsupportedFieldError,
    UnsupportedTemporalTypeError,
    UnsupportedUnitError,
    WeekTimeError,
)
from weektime.core.interfaces import TemporalAccessor, TemporalField, TemporalUnit
from weektime.core.time_of_day import TimeOfDay
from weektime.moment import WeeklyMoment

__all__ = [
    "ArithmeticOverflowError",
    "ChronoField",
    "ChronoUnit",
    "ConfigError",
    "ConversionError",
    "DayOfWeek",
    "InvalidArgumentError",
    "TemporalAccessor",
    "TemporalField",
    "TemporalUnit",
    "TimeOfDay",
    "UnsupportedFieldError",
    "UnsupportedTemporalTypeError",
    "UnsupportedUnitError",
    "WeekTimeError",
    "WeeklyMoment",
]
