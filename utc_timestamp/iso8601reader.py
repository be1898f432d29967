"""Reads ISO-8601 timestamps with reduced accuracy.

Accepted text: [-]YYYY[sep]MM[sep]DD[sep]HH[sep]MM[sep]SS[.fraction][Z|(+|-)HH[sep]MM]

Every separator is optional and may be any single non-digit character, so "2021-11-17T09:05:12Z", "20211117 090512"
and "2021/11/17 09.05" are all accepted. Hour, minute, second and the fraction may be left out from the right, the
missing fields are 0. A missing offset means UTC.
"""

from .duration import Duration
from .errors import ParseError
from .timestamp import Timestamp

# Characters that start an offset, they are never taken as a separator inside of the time of day.
_OFFSET_START = frozenset('+-Z')
_DIGITS = frozenset('0123456789')


class Iso8601Reader:

  def __init__(self, text: str) -> None:
    self._text = text
    self._position = 0

  @property
  def position(self) -> int:
    return self._position

  def read(self) -> Timestamp:
    """Consumes one timestamp from the text.

    Raises:
      ParseError: a digit was required but the text has a non-digit or ended.
      InvalidDateError: the date is not a valid proleptic Gregorian date.
    """
    try:
      return self._read()
    except ValueError as e:
      e.add_note(f'while reading timestamp from "{self._text}"')
      raise

  def read_offset(self) -> Duration:
    """Consumes an optional UTC offset. Anything that is not "Z", "+" or "-" is left as is and means UTC."""
    if self._at_end():
      return Duration.ZERO

    if self._peek() == 'Z':
      self._position += 1
      return Duration.ZERO

    if self._peek() not in '+-':
      return Duration.ZERO

    sign = -1 if self._next() == '-' else 1
    hours = self._read_digits(2)
    minutes = self._read_digits(2) if self._skip_separator() else 0
    return Duration.of(hours=hours, minutes=minutes) * sign

  def _read(self) -> Timestamp:
    sign = -1 if self._peek() == '-' else 1
    if sign < 0:
      self._position += 1
    year = self._read_digits(4) * sign

    self._skip_any_separator()
    month = self._read_digits(2)
    self._skip_any_separator()
    day = self._read_digits(2)

    hour = minute = second = nanosecond = 0
    if self._skip_separator():
      hour = self._read_digits(2)
      if self._skip_separator():
        minute = self._read_digits(2)
        if self._skip_separator():
          second = self._read_digits(2)
          if self._peek() == '.':
            self._position += 1
            nanosecond = self._read_fraction()

    offset = self.read_offset()
    return Timestamp.of(year, month, day, hour, minute, second, nanosecond, offset=offset)

  def _at_end(self) -> bool:
    return self._position >= len(self._text)

  def _peek(self, ahead: int = 0) -> str:
    position = self._position + ahead
    return self._text[position] if position < len(self._text) else ''

  def _next(self) -> str:
    if self._at_end():
      raise ParseError(f'unexpected end of text at position {self._position}')
    c = self._text[self._position]
    self._position += 1
    return c

  def _skip_any_separator(self) -> None:
    if not self._at_end() and self._peek() not in _DIGITS:
      self._position += 1

  def _skip_separator(self) -> bool:
    """Skips an optional separator in front of a time of day field.

    Returns whether the field follows, i.e. the next character is a digit, or is a separator followed by a digit.
    """
    if self._peek() in _DIGITS:
      return True
    if self._at_end() or self._peek() in _OFFSET_START or self._peek(1) not in _DIGITS:
      return False
    self._position += 1
    return True

  def _read_digits(self, count: int) -> int:
    value = 0
    for _ in range(count):
      c = self._next()
      if c not in _DIGITS:
        raise ParseError(f'expected a digit at position {self._position - 1}, got "{c}"')
      value = value * 10 + int(c)
    return value

  def _read_fraction(self) -> int:
    start = self._position
    while self._peek() in _DIGITS:
      self._position += 1
    digits = self._text[start:self._position]

    if digits == '':
      raise ParseError(f'expected a digit at position {self._position}, got "{self._peek()}"')
    # Exact integer arithmetic, digits after the 9th are truncated.
    return int(digits) * 10**9 // 10**len(digits)


def parse(text: str) -> Timestamp:
  return Iso8601Reader(text).read()


def parse_offset(text: str) -> Duration:
  return Iso8601Reader(text).read_offset()
