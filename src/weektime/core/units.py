"""Unit conversion and shifting for weekly moments.

Every supported unit has a fixed length in nanoseconds.  Amounts are split
into whole days plus a nanosecond remainder using truncating division, so
the sign of the remainder always matches the sign of the amount.  That
property is what makes the midnight carry check in :func:`shift` correct.
"""

from __future__ import annotations

import logging
from typing import Any

from .constants import (
    LONG_MAX,
    LONG_MIN,
    NANOS_PER_DAY,
    NANOS_PER_HALF_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from .enums import ChronoUnit, DayOfWeek
from .errors import ArithmeticOverflowError, InvalidArgumentError, UnsupportedUnitError
from .time_of_day import TimeOfDay

logger = logging.getLogger(__name__)

NANOS_PER_UNIT: dict[ChronoUnit, int] = {
    ChronoUnit.NANOS: 1,
    ChronoUnit.MICROS: NANOS_PER_MICROSECOND,
    ChronoUnit.MILLIS: NANOS_PER_MILLISECOND,
    ChronoUnit.SECONDS: NANOS_PER_SECOND,
    ChronoUnit.MINUTES: NANOS_PER_MINUTE,
    ChronoUnit.HOURS: NANOS_PER_HOUR,
    ChronoUnit.HALF_DAYS: NANOS_PER_HALF_DAY,
    ChronoUnit.DAYS: NANOS_PER_DAY,
}

SUPPORTED_UNITS = frozenset(NANOS_PER_UNIT)


def nanos_per_unit(unit: ChronoUnit) -> int:
    """Length of one ``unit`` in nanoseconds.

    Raises UnsupportedUnitError for built-in units longer than a day.
    """
    try:
        return NANOS_PER_UNIT[unit]
    except KeyError:
        raise UnsupportedUnitError(f"Unsupported unit: {unit.name}") from None


def check_amount(amount: int) -> int:
    """Return ``amount`` if it fits a signed 64-bit integer."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidArgumentError(f"Amount must be an integer, got {amount!r}")
    if not LONG_MIN <= amount <= LONG_MAX:
        raise ArithmeticOverflowError(
            f"Amount {amount} is outside the range [{LONG_MIN}, {LONG_MAX}]"
        )
    return amount


def _truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """divmod() rounding toward zero instead of toward negative infinity."""
    quotient = abs(dividend) // divisor
    if dividend < 0:
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def split_amount(amount: int, unit: ChronoUnit) -> tuple[int, int]:
    """Split ``amount`` of ``unit`` into ``(days, nanos)``.

    ``abs(nanos)`` is always less than one day and shares the sign of
    ``amount``.
    """
    per_unit = nanos_per_unit(unit)
    units_per_day = NANOS_PER_DAY // per_unit
    days, remainder = _truncated_divmod(amount, units_per_day)
    return days, remainder * per_unit


def shift(
    day: DayOfWeek, time: TimeOfDay, amount: int, unit: ChronoUnit
) -> tuple[DayOfWeek, TimeOfDay]:
    """Move ``(day, time)`` by ``amount`` units, wrapping across days and weeks."""
    check_amount(amount)
    days_to_add, nanos_to_add = split_amount(amount, unit)

    adjusted = time.plus_nanos(nanos_to_add)

    # Wrapping past midnight shows up as the time moving the "wrong" way.
    if amount > 0 and adjusted < time:
        carry = 1
    elif amount < 0 and adjusted > time:
        carry = -1
    else:
        carry = 0

    return day.plus(days_to_add + carry), adjusted


def resolve_unit(unit: Any) -> ChronoUnit | None:
    """Return the built-in unit, ``None`` for a custom unit, or raise."""
    from .interfaces import TemporalUnit

    if isinstance(unit, ChronoUnit):
        return unit
    if unit is None or not isinstance(unit, TemporalUnit):
        raise InvalidArgumentError(f"Not a temporal unit: {unit!r}")
    logger.debug("Delegating to custom unit %r", unit)
    return None
