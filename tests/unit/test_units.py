"""Test unit splitting and day/week wraparound in the unit converter."""

import pytest

from weektime.core.constants import (
    LONG_MAX,
    LONG_MIN,
    NANOS_PER_DAY,
    NANOS_PER_HALF_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
)
from weektime.core.enums import ChronoUnit, DayOfWeek
from weektime.core.errors import (
    ArithmeticOverflowError,
    InvalidArgumentError,
    UnsupportedUnitError,
)
from weektime.core.time_of_day import TimeOfDay
from weektime.core.units import (
    NANOS_PER_UNIT,
    SUPPORTED_UNITS,
    check_amount,
    nanos_per_unit,
    resolve_unit,
    shift,
    split_amount,
)


class TestUnitTable:
    def test_supported_units(self):
        assert SUPPORTED_UNITS == {
            ChronoUnit.NANOS,
            ChronoUnit.MICROS,
            ChronoUnit.MILLIS,
            ChronoUnit.SECONDS,
            ChronoUnit.MINUTES,
            ChronoUnit.HOURS,
            ChronoUnit.HALF_DAYS,
            ChronoUnit.DAYS,
        }

    def test_every_unit_divides_a_day(self):
        for unit, nanos in NANOS_PER_UNIT.items():
            assert NANOS_PER_DAY % nanos == 0, unit

    def test_half_day(self):
        assert nanos_per_unit(ChronoUnit.HALF_DAYS) == 12 * NANOS_PER_HOUR

    @pytest.mark.parametrize(
        "unit",
        [ChronoUnit.WEEKS, ChronoUnit.MONTHS, ChronoUnit.YEARS, ChronoUnit.FOREVER],
    )
    def test_larger_units_unsupported(self, unit):
        with pytest.raises(UnsupportedUnitError, match=unit.name):
            nanos_per_unit(unit)


class TestCheckAmount:
    def test_bounds_accepted(self):
        assert check_amount(LONG_MAX) == LONG_MAX
        assert check_amount(LONG_MIN) == LONG_MIN

    def test_overflow(self):
        with pytest.raises(ArithmeticOverflowError):
            check_amount(LONG_MAX + 1)
        with pytest.raises(ArithmeticOverflowError):
            check_amount(LONG_MIN - 1)

    def test_non_integer(self):
        with pytest.raises(InvalidArgumentError):
            check_amount(1.5)
        with pytest.raises(InvalidArgumentError):
            check_amount(True)
        with pytest.raises(InvalidArgumentError):
            check_amount(None)


class TestSplitAmount:
    @pytest.mark.parametrize(
        "amount,unit,expected",
        [
            (1, ChronoUnit.NANOS, (0, 1)),
            (NANOS_PER_DAY + 5, ChronoUnit.NANOS, (1, 5)),
            (1441, ChronoUnit.MINUTES, (1, NANOS_PER_MINUTE)),
            (3, ChronoUnit.HALF_DAYS, (1, NANOS_PER_HALF_DAY)),
            (10, ChronoUnit.DAYS, (10, 0)),
            (0, ChronoUnit.HOURS, (0, 0)),
        ],
    )
    def test_positive(self, amount, unit, expected):
        assert split_amount(amount, unit) == expected

    @pytest.mark.parametrize(
        "amount,unit,expected",
        [
            (-1, ChronoUnit.NANOS, (0, -1)),
            (-25, ChronoUnit.HOURS, (-1, -NANOS_PER_HOUR)),
            (-3, ChronoUnit.HALF_DAYS, (-1, -NANOS_PER_HALF_DAY)),
            (-10, ChronoUnit.DAYS, (-10, 0)),
        ],
    )
    def test_negative_truncates_toward_zero(self, amount, unit, expected):
        assert split_amount(amount, unit) == expected

    def test_extremes_fit_in_a_day(self):
        days, nanos = split_amount(LONG_MIN, ChronoUnit.MICROS)
        assert -NANOS_PER_DAY < nanos <= 0
        assert days < 0


class TestShift:
    def test_carry_forward_over_midnight(self):
        assert shift(DayOfWeek.MONDAY, TimeOfDay.MAX, 1, ChronoUnit.NANOS) == (
            DayOfWeek.TUESDAY,
            TimeOfDay.MIDNIGHT,
        )

    def test_borrow_backward_over_midnight(self):
        assert shift(DayOfWeek.MONDAY, TimeOfDay.MIDNIGHT, -1, ChronoUnit.NANOS) == (
            DayOfWeek.SUNDAY,
            TimeOfDay.MAX,
        )

    def test_days_wrap_week(self):
        assert shift(DayOfWeek.SUNDAY, TimeOfDay.NOON, 1, ChronoUnit.DAYS) == (
            DayOfWeek.MONDAY,
            TimeOfDay.NOON,
        )

    def test_negative_hours_landing_on_midnight(self):
        # Wednesday 06:00 - 30h = Tuesday 00:00, no borrow needed.
        assert shift(DayOfWeek.WEDNESDAY, TimeOfDay.of(6), -30, ChronoUnit.HOURS) == (
            DayOfWeek.TUESDAY,
            TimeOfDay.MIDNIGHT,
        )

    def test_negative_hours_with_borrow(self):
        # Wednesday 06:00 - 31h = Monday 23:00.
        assert shift(DayOfWeek.WEDNESDAY, TimeOfDay.of(6), -31, ChronoUnit.HOURS) == (
            DayOfWeek.MONDAY,
            TimeOfDay.of(23),
        )

    def test_half_days(self):
        assert shift(DayOfWeek.SATURDAY, TimeOfDay.of(18), 3, ChronoUnit.HALF_DAYS) == (
            DayOfWeek.MONDAY,
            TimeOfDay.of(6),
        )

    def test_zero_is_identity(self):
        assert shift(DayOfWeek.FRIDAY, TimeOfDay.NOON, 0, ChronoUnit.SECONDS) == (
            DayOfWeek.FRIDAY,
            TimeOfDay.NOON,
        )

    def test_unsupported_unit(self):
        with pytest.raises(UnsupportedUnitError):
            shift(DayOfWeek.FRIDAY, TimeOfDay.NOON, 1, ChronoUnit.MONTHS)

    def test_overflow(self):
        with pytest.raises(ArithmeticOverflowError):
            shift(DayOfWeek.FRIDAY, TimeOfDay.NOON, LONG_MAX + 1, ChronoUnit.NANOS)


class TestResolveUnit:
    def test_builtin(self):
        assert resolve_unit(ChronoUnit.HOURS) is ChronoUnit.HOURS

    def test_custom(self, shift_unit):
        assert resolve_unit(shift_unit) is None

    @pytest.mark.parametrize("unit", [None, "days", 3])
    def test_not_a_unit(self, unit):
        with pytest.raises(InvalidArgumentError, match="Not a temporal unit"):
            resolve_unit(unit)
