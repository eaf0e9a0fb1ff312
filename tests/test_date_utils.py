import unittest
import locale
import sys
import os
from datetime import datetime

# Add parent directory to path to import log_report
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from log_report.utils.date_utils import parse_timestamp, is_within_range


class TestParseTimestamp(unittest.TestCase):
    def test_offset_date_time_keeps_wall_clock(self):
        self.assertEqual(parse_timestamp("2024-05-17T08:05:32+03:00"), datetime(2024, 5, 17, 8, 5, 32))
        self.assertEqual(parse_timestamp("2024-05-17T08:05:32-07:00"), datetime(2024, 5, 17, 8, 5, 32))

    def test_zoned_date_time(self):
        self.assertEqual(parse_timestamp("2024-05-17T08:05:32Z"), datetime(2024, 5, 17, 8, 5, 32))

    def test_basic_date_time(self):
        self.assertEqual(parse_timestamp("20240517T080532Z"), datetime(2024, 5, 17, 8, 5, 32))

    def test_local_date_is_midnight(self):
        self.assertEqual(parse_timestamp("2012-05-17"), datetime(2012, 5, 17))

    def test_week_date_defaults_to_monday(self):
        self.assertEqual(parse_timestamp("2024-W20"), datetime(2024, 5, 13))

    def test_week_date_with_day(self):
        self.assertEqual(parse_timestamp("2024-W20-5"), datetime(2024, 5, 17))

    def test_ordinal_date(self):
        self.assertEqual(parse_timestamp("2024-138"), datetime(2024, 5, 17))

    def test_month_day_uses_current_year(self):
        result = parse_timestamp("--05-17")
        self.assertEqual(result, datetime(datetime.now().year, 5, 17))

    def test_log_timestamp(self):
        self.assertEqual(parse_timestamp("17/May/2015:08:05:32 +0000"), datetime(2015, 5, 17, 8, 5, 32))

    def test_surrounding_whitespace_ignored(self):
        self.assertEqual(parse_timestamp("  2012-05-17\n"), datetime(2012, 5, 17))

    def test_unrecognized_returns_none(self):
        for text in ("", "yesterday", "2024/05/17", "17-05-2024", "2024-05-17T08:05"):
            with self.subTest(text=text):
                self.assertIsNone(parse_timestamp(text))

    def test_invalid_values_return_none(self):
        for text in ("2024-13-45", "2024-02-30", "2024-400", "2024-W00", "--13-01",
                     "2024-05-17T25:00:00Z", "32/May/2015:08:05:32 +0000",
                     "2023-366", "2023-W53", "2023-W53-1", "17/Foo/2015:08:05:32 +0000"):
            with self.subTest(text=text):
                self.assertIsNone(parse_timestamp(text))

    def test_last_day_and_week_of_long_years(self):
        self.assertEqual(parse_timestamp("2024-366"), datetime(2024, 12, 31))
        self.assertEqual(parse_timestamp("2020-W53"), datetime(2020, 12, 28))
        self.assertEqual(parse_timestamp("2025-W01"), datetime(2024, 12, 30))

    def test_every_log_month_abbreviation(self):
        months = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
        for number, name in enumerate(months, start=1):
            with self.subTest(month=name):
                self.assertEqual(parse_timestamp(f"01/{name}/2020:00:00:00 +0000"), datetime(2020, number, 1))

    def test_log_timestamp_ignores_process_locale(self):
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            self.skipTest("de_DE.UTF-8 locale not installed")
        try:
            self.assertEqual(parse_timestamp("17/May/2015:08:05:32 +0000"), datetime(2015, 5, 17, 8, 5, 32))
            self.assertEqual(parse_timestamp("17/Dec/2015:08:05:32 +0000"), datetime(2015, 12, 17, 8, 5, 32))
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    def test_none_returns_none(self):
        self.assertIsNone(parse_timestamp(None))


class TestIsWithinRange(unittest.TestCase):
    def setUp(self):
        self.ts = datetime(2020, 1, 1, 12, 0, 0)

    def test_unbounded(self):
        self.assertTrue(is_within_range(self.ts))

    def test_bounds_are_inclusive(self):
        self.assertTrue(is_within_range(self.ts, self.ts, self.ts))

    def test_outside_bounds(self):
        self.assertFalse(is_within_range(self.ts, from_date=datetime(2020, 1, 2)))
        self.assertFalse(is_within_range(self.ts, to_date=datetime(2019, 12, 31)))


if __name__ == '__main__':
    unittest.main()
