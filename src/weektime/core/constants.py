"""Fixed conversion factors between nanoseconds and larger time units."""

NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = NANOS_PER_SECOND * 60
NANOS_PER_HOUR = NANOS_PER_MINUTE * 60
NANOS_PER_HALF_DAY = NANOS_PER_HOUR * 12
NANOS_PER_DAY = NANOS_PER_HOUR * 24
NANOS_PER_WEEK = NANOS_PER_DAY * 7

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * 60
SECONDS_PER_DAY = SECONDS_PER_HOUR * 24
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = MINUTES_PER_HOUR * 24
HOURS_PER_DAY = 24

DAYS_PER_WEEK = 7

# Amounts are bounded to a signed 64-bit integer.
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1
