from absl.testing import parameterized

from utc_timestamp.duration import Duration
from utc_timestamp.timestamp import Timestamp
from utc_timestamp.timestamprange import TimestampRange

EPOCH = Timestamp.UNIX_EPOCH


class TestTimestampRange(parameterized.TestCase):

  def test_eternity(self):
    self.assertEqual(TimestampRange.ETERNITY.start, Timestamp.MIN)
    self.assertEqual(TimestampRange.ETERNITY.stop, Timestamp.MAX)

  def test_storesValue(self):
    ts_range = TimestampRange(start=EPOCH, stop=EPOCH + Duration(1000))

    self.assertEqual(ts_range.start, EPOCH)
    self.assertEqual(ts_range.stop, EPOCH + Duration(1000))

  def test_startEqualsStop_raises(self):
    with self.assertRaises(ValueError):
      TimestampRange(start=EPOCH, stop=EPOCH)

  def test_startBiggerThanStop_raises(self):
    with self.assertRaises(ValueError):
      TimestampRange(start=EPOCH + Duration(1), stop=EPOCH)

  def test_str(self):
    self.assertEqual('range(start: 1970-01-01T00:00:00Z, stop: 1970-01-02T00:00:00.5Z)',
                     str(TimestampRange(start=EPOCH, stop=EPOCH + Duration.DAY + Duration.SECOND // 2)))

  @parameterized.parameters(
      (EPOCH, EPOCH + Duration.DAY, Duration.DAY),
      (Timestamp.ZERO, EPOCH, Duration.DAY * 2440588),
      (Timestamp.MIN, Timestamp.MAX, Timestamp.MAX - Timestamp.MIN),
  )
  def test_duration(self, timestamp_1: Timestamp, timestamp_2: Timestamp, resulting_duration: Duration):
    self.assertEqual(TimestampRange(timestamp_1, timestamp_2).duration(), resulting_duration)

  @parameterized.parameters(
      (EPOCH, True),
      (EPOCH + Duration.DAY - Duration(1), True),
      (EPOCH + Duration.DAY, False),
      (EPOCH - Duration(1), False),
      (EPOCH.jdn, False),
  )
  def test_contains(self, timestamp: object, is_contained: bool):
    self.assertEqual(timestamp in TimestampRange(EPOCH, EPOCH + Duration.DAY), is_contained)
