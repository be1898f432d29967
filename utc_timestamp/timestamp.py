import math
from dataclasses import dataclass
from time import time_ns
from typing import TYPE_CHECKING, Callable, ClassVar, Self, overload

from . import civiltime, gregorian
from .duration import Duration

if TYPE_CHECKING:
  from .iso8601reader import Iso8601Reader


@dataclass(frozen=True, order=True)
class Timestamp:
  """An instant in UTC with nanosecond resolution.

  Stored as the Julian Day Number of the day and the nanoseconds since midnight of that day. Both fields take part in
  ordering, equality and hashing in that order. The constructor carries any ns_of_day outside of
  [0, NANOSECONDS_PER_DAY) into jdn, so Timestamp(2440588, -1) is the last nanosecond of 1969-12-31.
  """
  jdn: int
  ns_of_day: int = 0

  _NANOSECONDS_PER_DAY: ClassVar[int] = civiltime.NANOSECONDS_PER_DAY
  _NANOSECONDS_PER_SECOND: ClassVar[int] = civiltime.NANOSECONDS_PER_SECOND
  _UNIX_EPOCH_JDN: ClassVar[int] = 2440588

  def __post_init__(self) -> None:
    for name in ('jdn', 'ns_of_day'):
      if not isinstance(value := getattr(self, name), int):
        raise TypeError(f'expected {name} to be an int, got {type(value).__name__}')

    if not 0 <= self.ns_of_day < self._NANOSECONDS_PER_DAY:
      carry = self.ns_of_day // self._NANOSECONDS_PER_DAY
      object.__setattr__(self, 'jdn', self.jdn + carry)
      object.__setattr__(self, 'ns_of_day', self.ns_of_day - carry * self._NANOSECONDS_PER_DAY)

  @classmethod
  def of(cls,
         year: int,
         month: int = 1,
         day: int = 1,
         hour: int = 0,
         minute: int = 0,
         second: int = 0,
         nanosecond: int = 0,
         offset: Duration = Duration.ZERO) -> Self:
    """Builds a Timestamp from calendar fields that are local to the UTC offset.

    Raises:
      InvalidDateError: year, month and day do not form a valid date.
    """
    jdn = gregorian.date_to_jdn(year, month, day)
    ns_of_day = civiltime.from_civil(hour, minute, second, nanosecond)
    return cls(jdn, ns_of_day - offset.duration_ns)

  @classmethod
  def build(cls, s: str, reader: Callable[[str], 'Iso8601Reader'] | None = None) -> Self:
    """Reads s with the given reader factory, Iso8601Reader if None."""
    from .iso8601reader import Iso8601Reader

    timestamp = (reader or Iso8601Reader)(s).read()
    return cls(timestamp.jdn, timestamp.ns_of_day)

  @classmethod
  def from_unix_time(cls, seconds: int) -> Self:
    return cls(cls._UNIX_EPOCH_JDN, seconds * cls._NANOSECONDS_PER_SECOND)

  @classmethod
  def from_unix_time_ns(cls, nanoseconds: int) -> Self:
    return cls(cls._UNIX_EPOCH_JDN, nanoseconds)

  @classmethod
  def from_julian_date(cls, julian_date: float) -> Self:
    jdn = math.floor(julian_date)
    return cls(jdn, round((julian_date - jdn) * cls._NANOSECONDS_PER_DAY))

  @classmethod
  def now(cls) -> Self:
    return cls.from_unix_time_ns(time_ns())

  def __str__(self) -> str:
    from .iso8601writer import Iso8601Writer

    return Iso8601Writer().write(self)

  def __add__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.__class__(self.jdn, self.ns_of_day + other.duration_ns)
    return NotImplemented

  def __radd__(self, other: object) -> Self:
    return self.__add__(other)

  @overload
  def __sub__(self, other: Duration) -> Self:
    ...

  @overload
  def __sub__(self, other: Self) -> Duration:
    ...

  def __sub__(self, other: object) -> Self | Duration:
    if isinstance(other, Duration):
      return self + (-other)
    if isinstance(other, Timestamp):
      days = self.jdn - other.jdn
      return Duration(days * self._NANOSECONDS_PER_DAY + self.ns_of_day - other.ns_of_day)
    return NotImplemented

  def truncated(self) -> Self:
    """Drops the fraction of the second."""
    if self.nanosecond == 0:
      return self
    return self.__class__(self.jdn, self.ns_of_day - self.nanosecond)

  def rounded(self) -> Self:
    """Rounds to the nearest second, half a second rounds up."""
    if self.nanosecond == 0:
      return self
    half_second = self._NANOSECONDS_PER_SECOND // 2
    return self.__class__(self.jdn, self.ns_of_day + half_second).truncated()

  def begin_of_day(self) -> Self:
    return self.__class__(self.jdn, 0)

  def end_of_day(self) -> Self:
    return self.__class__(self.jdn, self._NANOSECONDS_PER_DAY - 1)

  def to_julian_date(self) -> float:
    return self.jdn + self.ns_of_day / self._NANOSECONDS_PER_DAY

  def unix_time(self) -> int:
    return self.unix_time_ns() // self._NANOSECONDS_PER_SECOND

  def unix_time_ns(self) -> int:
    return (self.jdn - self._UNIX_EPOCH_JDN) * self._NANOSECONDS_PER_DAY + self.ns_of_day

  def date(self) -> tuple[int, int, int]:
    return gregorian.jdn_to_date(self.jdn)

  def time(self) -> tuple[int, int, int, int]:
    return civiltime.to_civil(self.ns_of_day)

  @property
  def year(self) -> int:
    return self.date()[0]

  @property
  def month(self) -> int:
    return self.date()[1]

  @property
  def day(self) -> int:
    return self.date()[2]

  @property
  def hour(self) -> int:
    return self.time()[0]

  @property
  def minute(self) -> int:
    return self.time()[1]

  @property
  def second(self) -> int:
    return self.time()[2]

  @property
  def nanosecond(self) -> int:
    return self.ns_of_day % self._NANOSECONDS_PER_SECOND

  @property
  def day_of_week(self) -> int:
    # 1 is Sunday.
    return gregorian.day_of_week(self.jdn)

  @property
  def day_of_year(self) -> int:
    return gregorian.day_of_year(self.jdn)

  ZERO: ClassVar[Self]
  UNIX_EPOCH: ClassVar[Self]
  MIN: ClassVar[Self]
  MAX: ClassVar[Self]


Timestamp.ZERO = Timestamp(0, 0)
Timestamp.UNIX_EPOCH = Timestamp(Timestamp._UNIX_EPOCH_JDN, 0)
# Widest range that the four digit year of the ISO-8601 text can express.
Timestamp.MIN = Timestamp.of(-9999, 1, 1)
Timestamp.MAX = Timestamp.of(9999, 12, 31).end_of_day()
