from absl.testing import parameterized

from utc_timestamp.duration import Duration


class TestDuration(parameterized.TestCase):

  @parameterized.parameters(
      ('+00:00:00.000000000', Duration.ZERO),
      ('+00:00:00.000000001', Duration(1)),
      ('-00:00:00.000000001', Duration(-1)),
      ('+00:00:01.000000000', Duration(10**9)),
      ('-00:00:01.000000000', Duration(-10**9)),
      ('+00:01:00.000000000', Duration(60 * 10**9)),
      ('-00:01:00.000000000', Duration(60 * -10**9)),
      ('+01:00:00.000000000', Duration(60 * 60 * 10**9)),
      ('-01:00:00.000000000', Duration(60 * 60 * -10**9)),
      ('+24:00:00.000000000', Duration(24 * 60 * 60 * 10**9)),
      ('-24:00:00.000000000', Duration(24 * 60 * 60 * -10**9)),
      ('+168:00:00.000000000', Duration(7 * 24 * 60 * 60 * 10**9)),
      ('+2562047788:00:54.775808000', Duration(2**63 * 1000)),
  )
  def test_str(self, s: str, duration: Duration):
    self.assertEqual(str(duration), s)

  def test_constants(self):
    self.assertEqual(Duration.NANOSECOND, Duration(1))
    self.assertEqual(Duration.MICROSECOND, Duration(10**3))
    self.assertEqual(Duration.MILLISECOND, Duration(10**6))
    self.assertEqual(Duration.SECOND, Duration(10**9))
    self.assertEqual(Duration.MINUTE, Duration.SECOND * 60)
    self.assertEqual(Duration.HOUR, Duration.MINUTE * 60)
    self.assertEqual(Duration.DAY, Duration.HOUR * 24)

  def test_of(self):
    self.assertEqual(
        Duration.of(days=1, hours=2, minutes=3, seconds=4, milliseconds=5, microseconds=6, nanoseconds=7),
        Duration(93_784_005_006_007))
    self.assertEqual(Duration.of(hours=-5, minutes=-30), Duration(-19_800 * 10**9))

  def test_notInt_raises(self):
    with self.assertRaises(TypeError):
      Duration(1.5)  # type: ignore

  def test_negate(self):
    self.assertEqual(-Duration(5), Duration(-5))
    self.assertEqual(-Duration.ZERO, Duration.ZERO)
    self.assertEqual(abs(Duration(-5)), Duration(5))

  @parameterized.parameters(
      (Duration(1), Duration(2), Duration(3), Duration(-1)),
      (Duration.DAY, -Duration.DAY, Duration.ZERO, Duration.DAY * 2),
  )
  def test_addSubtract(self, duration_1: Duration, duration_2: Duration, total: Duration, difference: Duration):
    self.assertEqual(duration_1 + duration_2, total)
    self.assertEqual(duration_1 - duration_2, difference)

  @parameterized.parameters(
      (Duration(1), Duration(1), 1.0),
      (Duration.HOUR, Duration.MINUTE, 60.0),
      (Duration.ZERO, Duration(1), 0.0),
      (Duration(-3), Duration(2), -1.5),
  )
  def test_trueDivision(self, duration_1: Duration, duration_2: Duration, ratio: float):
    self.assertEqual(duration_1 / duration_2, ratio)

  @parameterized.parameters(
      (Duration(7), 2, Duration(3)),
      (Duration(-7), 2, Duration(-4)),
  )
  def test_floorDivision(self, duration: Duration, divisor: int, expected_duration: Duration):
    self.assertEqual(duration // divisor, expected_duration)

  @parameterized.parameters(
      (Duration.ZERO, 1, Duration.ZERO),
      (Duration(1), 100, Duration(100)),
      (Duration(-1), 100, Duration(-100)),
  )
  def test_multiplication(self, duration: Duration, ratio: int, expected_duration: Duration):
    self.assertEqual(duration * ratio, expected_duration)
    self.assertEqual(ratio * duration, expected_duration)

  def test_bool(self):
    self.assertFalse(Duration.ZERO)
    self.assertTrue(Duration(-1))

  def test_order(self):
    self.assertLess(Duration(-1), Duration.ZERO)
    self.assertGreater(Duration.DAY, Duration.HOUR)

  @parameterized.parameters(
      ('0', Duration.ZERO),
      ('0000', Duration.ZERO),
      ('100', Duration(100)),
      ('-100', Duration(-100)),
      ('18446744073709551616', Duration(2**64)),
  )
  def test_build_int(self, s: str, expected_duration: Duration):
    self.assertEqual(Duration.build(s), expected_duration)

  @parameterized.parameters(
      ('+00:00:00.000000000', Duration.ZERO),
      ('+00:00:00', Duration.ZERO),
      ('+00:00:00.000000001', Duration(1)),
      ('-00:00:00.000000001', Duration(-1)),
      ('+00:00:00.5', Duration(500_000_000)),
      ('-00:00:01.25', Duration(-1_250_000_000)),
      ('+00:00:60', Duration(60 * 10**9)),
      ('-01:30:00', Duration(-90 * 60 * 10**9)),
      ('+24:00:00.000000000', Duration.DAY),
      ('+168:00:00.000000000', Duration.DAY * 7),
  )
  def test_build_regex(self, s: str, expected_duration: Duration):
    self.assertEqual(Duration.build(s), expected_duration)

  @parameterized.parameters(
      ('aaaaa'),
      ('00:00:00.000000000'),
      ('=00:00:00.000000000'),
      ('+:00:00.000000000'),
      ('+0:00:00.000000000'),
      ('+00::00.000000000'),
      ('+00:0:00.000000000'),
      ('+00:00:.000000000'),
      ('+00:00:0.000000000'),
      ('+00:00:00.'),
      ('+00:00:00.0000000001'),
  )
  def test_build_invalidString_raises(self, s: str):
    with self.assertRaises(ValueError):
      Duration.build(s)

  @parameterized.parameters(Duration.ZERO, Duration(-1), Duration.DAY * 3 + Duration(123))
  def test_build_str(self, duration: Duration):
    self.assertEqual(Duration.build(str(duration)), duration)
