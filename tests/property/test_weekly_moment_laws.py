"""Property tests: algebraic laws of weekly-moment arithmetic.

Uses hypothesis to generate arbitrary moments, units and amounts and checks
that shifting and measuring stay consistent with each other on the
seven-day cycle:

- ``plus`` followed by ``minus`` of the same amount is the identity.
- ``until`` recovers any forward shift shorter than a week.
- ``until`` is never negative and is zero from a moment to itself.
- Ordering is total and agrees with equality and hashing.
"""

from hypothesis import given, settings, strategies as st

from weektime.core.constants import LONG_MAX, LONG_MIN, NANOS_PER_DAY, NANOS_PER_WEEK
from weektime.core.enums import ChronoUnit, DayOfWeek
from weektime.core.time_of_day import TimeOfDay
from weektime.core.units import NANOS_PER_UNIT
from weektime.moment import WeeklyMoment

SUPPORTED = list(NANOS_PER_UNIT)

days = st.sampled_from(list(DayOfWeek))
times = st.integers(min_value=0, max_value=NANOS_PER_DAY - 1).map(TimeOfDay)
moments = st.builds(WeeklyMoment, days, times)
units = st.sampled_from(SUPPORTED)
# Excludes LONG_MIN so that -amount stays in range.
amounts = st.integers(min_value=LONG_MIN + 1, max_value=LONG_MAX)


@given(day=days, time=times)
def test_of_preserves_fields(day, time):
    moment = WeeklyMoment.of(day, time)
    assert moment.day_of_week is day
    assert moment.time_of_day == time


@given(moment=moments, amount=amounts, unit=units)
@settings(max_examples=300)
def test_plus_then_minus_round_trips(moment, amount, unit):
    assert moment.plus(amount, unit).minus(amount, unit) == moment


@given(moment=moments, amount=amounts, unit=units)
@settings(max_examples=200)
def test_minus_equals_plus_of_negation(moment, amount, unit):
    assert moment.minus(amount, unit) == moment.plus(-amount, unit)


@given(moment=moments, unit=units)
def test_minus_long_min_is_decomposed(moment, unit):
    assert moment.minus(LONG_MIN, unit) == moment.plus(LONG_MAX, unit).plus(1, unit)


@given(moment=moments, unit=units, data=st.data())
@settings(max_examples=300)
def test_until_recovers_shift_within_a_week(moment, unit, data):
    week_in_unit = NANOS_PER_WEEK // NANOS_PER_UNIT[unit]
    n = data.draw(st.integers(min_value=0, max_value=week_in_unit - 1))
    assert moment.until(moment.plus(n, unit), unit) == n


@given(moment=moments, amount=amounts)
def test_until_in_nanos_is_shift_modulo_week(moment, amount):
    shifted = moment.plus(amount, ChronoUnit.NANOS)
    assert moment.until(shifted, ChronoUnit.NANOS) == amount % NANOS_PER_WEEK


@given(moment=moments, unit=units)
def test_until_self_is_zero(moment, unit):
    assert moment.until(moment, unit) == 0


@given(a=moments, b=moments, unit=units)
def test_until_is_bounded(a, b, unit):
    distance = a.until(b, unit)
    assert 0 <= distance < NANOS_PER_WEEK // NANOS_PER_UNIT[unit]


@given(a=moments, b=moments)
def test_forward_distances_sum_to_a_week(a, b):
    there = a.until(b, ChronoUnit.NANOS)
    back = b.until(a, ChronoUnit.NANOS)
    if a == b:
        assert there == back == 0
    else:
        assert there + back == NANOS_PER_WEEK


@given(a=moments, b=moments)
def test_ordering_consistent_with_equality(a, b):
    assert (a.compare_to(b) == 0) == (a == b)
    assert a.compare_to(b) == -b.compare_to(a)
    if a == b:
        assert hash(a) == hash(b)


@given(a=moments, b=moments)
def test_ordering_is_lexicographic(a, b):
    key_a = (a.day_of_week.value, a.time_of_day.nano_of_day)
    key_b = (b.day_of_week.value, b.time_of_day.nano_of_day)
    assert (a < b) == (key_a < key_b)


@given(moment=moments, amount=st.integers(min_value=-10**6, max_value=10**6))
def test_days_only_change_the_day(moment, amount):
    shifted = moment.plus(amount, ChronoUnit.DAYS)
    assert shifted.time_of_day == moment.time_of_day
    assert shifted.day_of_week is moment.day_of_week.plus(amount)
