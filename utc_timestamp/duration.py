import re
from dataclasses import dataclass
from typing import ClassVar, Self


@dataclass(frozen=True, order=True)
class Duration:
  duration_ns: int

  _MICROSECOND_NS: ClassVar[int] = 10**3
  _MILLISECOND_NS: ClassVar[int] = 10**6
  _SECOND_NS: ClassVar[int] = 10**9
  _MINUTE_NS: ClassVar[int] = _SECOND_NS * 60
  _HOUR_NS: ClassVar[int] = _MINUTE_NS * 60
  _DAY_NS: ClassVar[int] = _HOUR_NS * 24

  def __post_init__(self) -> None:
    if not isinstance(self.duration_ns, int):
      raise TypeError(f'expected duration_ns to be an int, got {type(self.duration_ns).__name__}')

  @classmethod
  def of(cls,
         *,
         days: int = 0,
         hours: int = 0,
         minutes: int = 0,
         seconds: int = 0,
         milliseconds: int = 0,
         microseconds: int = 0,
         nanoseconds: int = 0) -> Self:
    duration_ns = days * cls._DAY_NS
    duration_ns += hours * cls._HOUR_NS
    duration_ns += minutes * cls._MINUTE_NS
    duration_ns += seconds * cls._SECOND_NS
    duration_ns += milliseconds * cls._MILLISECOND_NS
    duration_ns += microseconds * cls._MICROSECOND_NS
    duration_ns += nanoseconds
    return cls(duration_ns)

  def __str__(self) -> str:
    ns = self.duration_ns
    sign = '-' if ns < 0 else '+'
    ns = abs(ns)

    hours = ns // self._HOUR_NS
    ns %= self._HOUR_NS
    minutes = ns // self._MINUTE_NS
    ns %= self._MINUTE_NS
    seconds = ns // self._SECOND_NS
    ns %= self._SECOND_NS

    return f'{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{ns:09d}'

  def __neg__(self) -> Self:
    return self.__class__(-self.duration_ns)

  def __abs__(self) -> Self:
    return self.__class__(abs(self.duration_ns))

  def __add__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.__class__(self.duration_ns + other.duration_ns)
    return NotImplemented

  def __sub__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.__class__(self.duration_ns - other.duration_ns)
    return NotImplemented

  def __truediv__(self, other: object) -> float:
    if isinstance(other, Duration):
      return self.duration_ns / other.duration_ns
    return NotImplemented

  def __floordiv__(self, other: object) -> Self:
    if isinstance(other, int):
      return self.__class__(self.duration_ns // other)
    return NotImplemented

  def __mul__(self, other: object) -> Self:
    if isinstance(other, int):
      return self.__class__(self.duration_ns * other)
    return NotImplemented

  def __rmul__(self, other: object) -> Self:
    return self.__mul__(other)

  def __bool__(self) -> bool:
    return self.duration_ns != 0

  _REGEX: ClassVar[str] = (r'^'
                           r'(?P<sign>[+-])'
                           r'(?P<hours>\d{2,})'
                           r':(?P<minutes>\d{2})'
                           r':(?P<seconds>\d{2})'
                           r'(?:\.(?P<fraction>\d{1,9}))?'
                           r'$')
  _PATTERN: ClassVar[re.Pattern[str]] = re.compile(_REGEX)

  @classmethod
  def build(cls, s: str) -> Self:
    try:
      return cls(int(s))
    except ValueError:
      pass

    if (match := cls._PATTERN.search(s)) is None:
      raise ValueError(f'unable to parse duration "{s}", expected an integer or to match regex {cls._REGEX}')

    fraction = match['fraction'] or '0'
    duration_ns = cls.of(
        hours=int(match['hours']),
        minutes=int(match['minutes']),
        seconds=int(match['seconds']),
        nanoseconds=int(fraction.ljust(9, '0')),
    ).duration_ns
    duration_ns *= (-1 if match['sign'] == '-' else 1)

    return cls(duration_ns)

  ZERO: ClassVar[Self]
  NANOSECOND: ClassVar[Self]
  MICROSECOND: ClassVar[Self]
  MILLISECOND: ClassVar[Self]
  SECOND: ClassVar[Self]
  MINUTE: ClassVar[Self]
  HOUR: ClassVar[Self]
  DAY: ClassVar[Self]


Duration.ZERO = Duration(0)
Duration.NANOSECOND = Duration(1)
Duration.MICROSECOND = Duration(Duration._MICROSECOND_NS)
Duration.MILLISECOND = Duration(Duration._MILLISECOND_NS)
Duration.SECOND = Duration(Duration._SECOND_NS)
Duration.MINUTE = Duration(Duration._MINUTE_NS)
Duration.HOUR = Duration(Duration._HOUR_NS)
Duration.DAY = Duration(Duration._DAY_NS)
