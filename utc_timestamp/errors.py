class TimestampError(ValueError):
  pass


class InvalidDateError(TimestampError):
  """Year, month and day do not name a day of the proleptic Gregorian calendar."""


class ParseError(TimestampError):
  """Text is not an ISO-8601 timestamp, e.g. a non-digit where a digit is required."""
