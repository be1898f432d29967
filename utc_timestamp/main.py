from typing import Any

from absl import app, flags, logging

from .duration import Duration
from .flagutil import value_or_default
from .iso8601reader import parse, parse_offset
from .iso8601writer import Iso8601Format, Iso8601Writer
from .timestamp import Timestamp
from .timestamprange import TimestampRange
from .timestamprangeiterator import TimestampRangeIterator

_TIMESTAMP = flags.DEFINE_string(
    name='timestamp',
    default=None,
    help='ISO-8601 timestamp to convert (ex. 2021-11-17T09:05:12.94603Z). '
    'Any single non-digit character is accepted as a separator. '
    'If not provided, the current time is used.',
)
_ADD = flags.DEFINE_string(
    name='add',
    default=None,
    help='Duration to add to the timestamp, as nanoseconds or [+-]HH:MM:SS[.fraction] (ex. -01:30:00).',
)
_TRUNCATE = flags.DEFINE_bool(
    name='truncate',
    default=False,
    help='Drop the fraction of the second.',
)
_ROUND = flags.DEFINE_bool(
    name='round',
    default=False,
    help='Round to the nearest second, half a second rounds up.',
)
_OFFSET = flags.DEFINE_string(
    name='offset',
    default=None,
    help='UTC offset to write the timestamp in (ex. +05:30, -08, Z).',
)

_DATE_SEPARATOR = flags.DEFINE_string(
    name='date_separator',
    default='-',
    help='Character between year, month and day. Empty string to leave it out.',
)
_DATE_TIME_SEPARATOR = flags.DEFINE_string(
    name='date_time_separator',
    default='T',
    help='Character between the date and the time of day. Empty string to leave it out.',
)
_TIME_SEPARATOR = flags.DEFINE_string(
    name='time_separator',
    default=':',
    help='Character between hour, minute and second. Empty string to leave it out.',
)
_TIMEZONE_INDICATOR = flags.DEFINE_string(
    name='timezone_indicator',
    default='Z',
    help='Character written for UTC. Empty string to write neither the indicator nor an offset.',
)
_DECIMAL_MARK = flags.DEFINE_string(
    name='decimal_mark',
    default='.',
    help='Character in front of the fraction of the second. Empty string to leave it out.',
)

_STOP = flags.DEFINE_string(
    name='stop',
    default=None,
    help='ISO-8601 timestamp, exclusive. '
    'If provided, every step from the timestamp until the stop timestamp is written.',
)
_STEP = flags.DEFINE_string(
    name='step',
    default=str(Duration.DAY),
    help='Distance between the timestamps written when --stop is provided.',
)


def _is_duration(value: str | None) -> bool:
  if value is None:
    return True
  try:
    Duration.build(value)
  except ValueError:
    return False
  return True


def _is_single_non_digit_or_empty(value: str) -> bool:
  return len(value) <= 1 and not value.isdigit()


def _at_most_one_rounding(flag: dict[str, Any]) -> bool:
  if flag['truncate'] and flag['round']:
    raise flags.ValidationError('Flags truncate and round are mutually exclusive.')
  return True


flags.register_validator(_ADD, _is_duration, message='--add expected to be a duration.')
flags.register_validator(_STEP, _is_duration, message='--step expected to be a duration.')
for _flag_holder in (_DATE_SEPARATOR, _DATE_TIME_SEPARATOR, _TIME_SEPARATOR, _TIMEZONE_INDICATOR, _DECIMAL_MARK):
  flags.register_validator(_flag_holder,
                           _is_single_non_digit_or_empty,
                           message=f'--{_flag_holder.name} expected to be a single non-digit character or empty.')
flags.register_multi_flags_validator([_TRUNCATE, _ROUND], _at_most_one_rounding)


def _get_format() -> Iso8601Format:
  return Iso8601Format(
      date_separator=value_or_default(_DATE_SEPARATOR) or None,
      date_time_separator=value_or_default(_DATE_TIME_SEPARATOR) or None,
      time_separator=value_or_default(_TIME_SEPARATOR) or None,
      timezone_indicator=value_or_default(_TIMEZONE_INDICATOR) or None,
      decimal_mark=value_or_default(_DECIMAL_MARK) or None,
  )


def _get_timestamp() -> Timestamp:
  text = value_or_default(_TIMESTAMP)
  timestamp = parse(text) if text is not None else Timestamp.now()

  if (duration := value_or_default(_ADD)) is not None:
    timestamp += Duration.build(duration)
  if value_or_default(_TRUNCATE):
    timestamp = timestamp.truncated()
  if value_or_default(_ROUND):
    timestamp = timestamp.rounded()

  return timestamp


def _log_details(timestamp: Timestamp) -> None:
  logging.info(f'{timestamp}: jdn={timestamp.jdn}, ns_of_day={timestamp.ns_of_day}, '
               f'day_of_week={timestamp.day_of_week}, day_of_year={timestamp.day_of_year}, '
               f'julian_date={timestamp.to_julian_date()}')


def run() -> list[str]:
  writer = Iso8601Writer(_get_format())

  try:
    offset = parse_offset(text) if (text := value_or_default(_OFFSET)) is not None else None
    timestamp = _get_timestamp()
    stop = parse(text) if (text := value_or_default(_STOP)) is not None else None
  except ValueError as e:
    logging.error(f'Unable to read timestamp: {e}')
    raise

  if stop is None:
    _log_details(timestamp)
    return [writer.write(timestamp, offset)]

  iterator = TimestampRangeIterator(TimestampRange(timestamp, stop), Duration.build(value_or_default(_STEP)))
  logging.info(f'Writing {iterator.length()} timestamps from {timestamp} to {stop}.')

  lines: list[str] = []
  for ts_range in iterator:
    _log_details(ts_range.start)
    lines.append(writer.write(ts_range.start, offset))
  return lines


def main(args: list[str]) -> None:
  for line in run():
    print(line)


def app_run_main() -> None:
  app.run(main)


if __name__ == '__main__':
  app_run_main()
