from dataclasses import dataclass
from typing import ClassVar, Self

from .duration import Duration
from .timestamp import Timestamp


@dataclass(frozen=True, kw_only=True)
class Iso8601Format:
  # Each separator is a single character, None leaves it out.
  date_separator: str | None = '-'
  date_time_separator: str | None = 'T'
  time_separator: str | None = ':'
  # Written for UTC. None writes neither the indicator nor an offset.
  timezone_indicator: str | None = 'Z'
  decimal_mark: str | None = '.'

  def __post_init__(self) -> None:
    for name in ('date_separator', 'date_time_separator', 'time_separator', 'timezone_indicator', 'decimal_mark'):
      value = getattr(self, name)
      if value is not None and len(value) != 1:
        raise ValueError(f'expected "{name}" to be a single character or None, got "{value}"')
      if value is not None and value.isdigit():
        raise ValueError(f'expected "{name}" to be a non-digit, got "{value}"')

  @classmethod
  def build(cls, s: str) -> Self:
    """Builds a format from 5 characters in the order of the fields, e.g. "-T:Z.". A space leaves the field out."""
    if len(s) != 5:
      raise ValueError(f'expected 5 characters, got "{s}"')

    date_separator, date_time_separator, time_separator, timezone_indicator, decimal_mark = (
        None if c == ' ' else c for c in s)
    return cls(date_separator=date_separator,
               date_time_separator=date_time_separator,
               time_separator=time_separator,
               timezone_indicator=timezone_indicator,
               decimal_mark=decimal_mark)

  DEFAULT: ClassVar[Self]


Iso8601Format.DEFAULT = Iso8601Format()


class Iso8601Writer:

  def __init__(self, iso_format: Iso8601Format = Iso8601Format.DEFAULT) -> None:
    self._format = iso_format

  def write(self, timestamp: Timestamp, offset: Duration | None = None) -> str:
    """Formats the timestamp, shifted to the UTC offset when one is given.

    Raises:
      ValueError: the offset is not a whole number of minutes.
    """
    if offset is not None and offset.duration_ns % Duration.MINUTE.duration_ns != 0:
      raise ValueError(f'expected offset to be a whole number of minutes, got {offset}')

    if self._format.timezone_indicator is not None and offset:
      timestamp += offset

    year, month, day = timestamp.date()
    hour, minute, second, nanosecond = timestamp.time()

    parts = [
        '-' if year < 0 else '',
        f'{abs(year):04d}',
        self._format.date_separator or '',
        f'{month:02d}',
        self._format.date_separator or '',
        f'{day:02d}',
        self._format.date_time_separator or '',
        f'{hour:02d}',
        self._format.time_separator or '',
        f'{minute:02d}',
        self._format.time_separator or '',
        f'{second:02d}',
    ]

    if nanosecond != 0:
      parts.append(self._format.decimal_mark or '')
      parts.append(f'{nanosecond:09d}'.rstrip('0'))

    if self._format.timezone_indicator is not None:
      parts.append(self._offset(offset) if offset else self._format.timezone_indicator)

    return ''.join(parts)

  def _offset(self, offset: Duration) -> str:
    sign = '-' if offset < Duration.ZERO else '+'
    minutes = abs(offset).duration_ns // Duration.MINUTE.duration_ns
    hours, minutes = divmod(minutes, 60)
    return f'{sign}{hours:02d}{self._format.time_separator or ""}{minutes:02d}'


def format_timestamp(timestamp: Timestamp,
                     iso_format: Iso8601Format = Iso8601Format.DEFAULT,
                     offset: Duration | None = None) -> str:
  return Iso8601Writer(iso_format).write(timestamp, offset)
