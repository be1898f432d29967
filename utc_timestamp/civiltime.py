NANOSECONDS_PER_SECOND = 10**9
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
NANOSECONDS_PER_DAY = SECONDS_PER_DAY * NANOSECONDS_PER_SECOND


def to_civil(ns_of_day: int) -> tuple[int, int, int, int]:
  """Splits nanoseconds since midnight into (hour, minute, second, nanosecond)."""
  seconds = ns_of_day // NANOSECONDS_PER_SECOND
  return (
      seconds % SECONDS_PER_DAY // SECONDS_PER_HOUR,
      seconds % SECONDS_PER_HOUR // SECONDS_PER_MINUTE,
      seconds % SECONDS_PER_MINUTE,
      ns_of_day % NANOSECONDS_PER_SECOND,
  )


def from_civil(hour: int, minute: int, second: int, nanosecond: int = 0) -> int:
  # Fields are not range checked, Timestamp carries any overflow into the day number.
  seconds = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
  return seconds * NANOSECONDS_PER_SECOND + nanosecond
