import unittest
import re
import sys
import os
from datetime import datetime

# Add parent directory to path to import log_report
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from log_report.parse.log_parser import LogEntry, LogParseError, parse_log_line

LINE = ('93.180.71.3 - - [17/May/2015:08:05:32 +0000] "GET /downloads/product_1 HTTP/1.1" 304 0 "-" '
        '"Debian APT-HTTP/1.3 (0.8.16~exp12ubuntu10.21)"')

REFERENCE_PATTERN = re.compile(
    r'^(?P<ip>\S+) - (?P<user>\S+) \[[^]]+] "\S+ (?P<resource>\S+) [^"]*" (?P<code>\d{3}) (?P<size>\d+) "[^"]*" "[^"]*"$'
)


class TestLogParser(unittest.TestCase):
    def test_parse_valid_line(self):
        record = parse_log_line(LINE)
        self.assertIsNotNone(record)
        self.assertEqual(record.ip, '93.180.71.3')
        self.assertEqual(record.user, '-')
        self.assertEqual(record.timestamp, datetime(2015, 5, 17, 8, 5, 32))
        self.assertEqual(record.resource, '/downloads/product_1')
        self.assertEqual(record.status_code, '304')
        self.assertEqual(record.response_size, 0)
        self.assertEqual(record.referrer, '-')
        self.assertEqual(record.user_agent, 'Debian APT-HTTP/1.3 (0.8.16~exp12ubuntu10.21)')

    def test_entry_has_report_fields(self):
        record = parse_log_line(LINE + '\n')
        self.assertEqual(record.entry, LogEntry('93.180.71.3', '-', '/downloads/product_1', '304', 0))

    def test_fields_agree_with_reference_regex(self):
        fixture = os.path.join(os.path.dirname(__file__), 'fixtures', '10_lines_test.txt')
        with open(fixture) as f:
            for line in f:
                line = line.rstrip('\n')
                with self.subTest(line=line):
                    expected = REFERENCE_PATTERN.match(line).groupdict()
                    entry = parse_log_line(line).entry
                    self.assertEqual(entry.ip, expected['ip'])
                    self.assertEqual(entry.user, expected['user'])
                    self.assertEqual(entry.resource, expected['resource'])
                    self.assertEqual(entry.status_code, expected['code'])
                    self.assertEqual(entry.response_size, int(expected['size']))

    def test_parse_invalid_line(self):
        self.assertIsNone(parse_log_line('Invalid Log Line'))
        self.assertIsNone(parse_log_line(''))

    def test_non_numeric_size_rejected(self):
        self.assertIsNone(parse_log_line(LINE.replace('304 0', '304 -')))

    def test_bad_timestamp_rejected(self):
        self.assertIsNone(parse_log_line(LINE.replace('17/May/2015', '17/Foo/2015')))

    def test_request_without_path_rejected(self):
        self.assertIsNone(parse_log_line(LINE.replace('GET /downloads/product_1 HTTP/1.1', 'GARBAGE')))

    def test_strict_mode_raises(self):
        with self.assertRaises(LogParseError):
            parse_log_line('Invalid Log Line', strict=True)
        with self.assertRaises(LogParseError):
            parse_log_line(LINE.replace('17/May/2015', '17/Foo/2015'), strict=True)

    def test_strict_mode_skips_blank_lines(self):
        self.assertIsNone(parse_log_line('\n', strict=True))


if __name__ == '__main__':
    unittest.main()
