"""Conversions between proleptic Gregorian dates and Julian Day Numbers.

JDN 0 is the proleptic Julian calendar day zero, which is -4713-11-24 in the proleptic Gregorian calendar. Years are
astronomical: year 0 is 1 BC, year -1 is 2 BC.
"""

from .errors import InvalidDateError

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_FIRST_DAY_OF_MONTH = (1, 32, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)

# JDN of 0000-03-01, the origin of the day count used by the inverse.
_MARCH_1_OF_YEAR_0 = 1721120

_DAYS_PER_400_YEARS = 146097
_DAYS_PER_100_YEARS = 36524
_DAYS_PER_4_YEARS = 1461


def is_leap_year(year: int) -> bool:
  return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
  return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
  if not 1 <= month <= 12:
    raise InvalidDateError(f'month {month} out of range, expected to be in range [1, 12]')

  if month == 2 and is_leap_year(year):
    return 29
  return _DAYS_IN_MONTH[month - 1]


def date_to_jdn(year: int, month: int, day: int) -> int:
  """Returns the Julian Day Number of the given date.

  Raises:
    InvalidDateError: month is not in [1, 12] or day is not a day of that month.
  """
  max_day = days_in_month(year, month)
  if not 1 <= day <= max_day:
    raise InvalidDateError(f'day {day} out of range for {year:04d}-{month:02d}, '
                           f'expected to be in range [1, {max_day}]')

  # Count years from March so that the leap day is the last day of the year.
  a = (14 - month) // 12
  y = year + 4800 - a
  m = month + 12 * a - 3
  return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_date(jdn: int) -> tuple[int, int, int]:
  """Returns (year, month, day) of the given Julian Day Number. Inverse of date_to_jdn()."""
  days = jdn - _MARCH_1_OF_YEAR_0

  quadricentennial, days = divmod(days, _DAYS_PER_400_YEARS)
  # The last century of a 400 year cycle has one more day, clamp so that it stays in century 3.
  century = min(days // _DAYS_PER_100_YEARS, 3)
  days -= century * _DAYS_PER_100_YEARS
  quadrennium, days = divmod(days, _DAYS_PER_4_YEARS)
  annum = min(days // 365, 3)
  days -= annum * 365

  year = quadricentennial * 400 + century * 100 + quadrennium * 4 + annum
  # Months counted from March.
  m = (5 * days + 2) // 153
  day = days - (153 * m + 2) // 5 + 1
  month = m + 3 if m < 10 else m - 9
  if month <= 2:
    year += 1
  return year, month, day


def day_of_week(jdn: int) -> int:
  """Returns 1 for Sunday through 7 for Saturday."""
  return (jdn + 1) % 7 + 1


def day_of_year(jdn: int) -> int:
  year, month, day = jdn_to_date(jdn)
  result = _FIRST_DAY_OF_MONTH[month - 1] + day - 1
  if month > 2 and is_leap_year(year):
    result += 1
  return result
