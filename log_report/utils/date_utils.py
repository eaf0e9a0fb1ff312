"""
Date and time utility functions

Free-form ISO 8601 strings (and the access log timestamp form) are recognized
by trying an ordered table of (pattern, formatter) pairs. The first pattern
that matches the whole string decides which formatter is used.
"""

import calendar
import re
from datetime import datetime
from typing import Callable, List, Optional, Tuple

# Format of the [timestamp] field in access log lines, after the month
# abbreviation has been replaced by its number
LOG_DATE_FORMAT = '%d/%m/%Y:%H:%M:%S %z'

# English month abbreviations, independent of the process locale
MONTH_ABBREVIATIONS = {name: f"{number:02d}" for number, name in enumerate(
    ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
     'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec'), start=1)}


def _strptime(text: str, fmt: str) -> Optional[datetime]:
    """Parse with strptime, return None instead of raising. Offsets are dropped."""
    try:
        parsed = datetime.strptime(text, fmt)
    except ValueError:
        return None
    return parsed.replace(tzinfo=None)


def _parse_offset_date_time(text: str) -> Optional[datetime]:
    # 2024-05-17T08:05:32+03:00
    return _strptime(text, '%Y-%m-%dT%H:%M:%S%z')


def _parse_zoned_date_time(text: str) -> Optional[datetime]:
    # 2024-05-17T08:05:32Z
    return _strptime(text, '%Y-%m-%dT%H:%M:%SZ')


def _parse_basic_date_time(text: str) -> Optional[datetime]:
    # 20240517T080532Z
    return _strptime(text, '%Y%m%dT%H%M%SZ')


def _parse_local_date(text: str) -> Optional[datetime]:
    return _strptime(text, '%Y-%m-%d')


def _parse_week_date(text: str) -> Optional[datetime]:
    # Monday when no day of week is given
    if len(text) == len('YYYY-Www'):
        text += '-1'
    parsed = _strptime(text, '%G-W%V-%u')
    # strptime rolls week 53 of a 52-week year over into the next year
    if parsed is None or tuple(parsed.isocalendar())[:2] != (int(text[:4]), int(text[6:8])):
        return None
    return parsed


def _parse_ordinal_date(text: str) -> Optional[datetime]:
    parsed = _strptime(text, '%Y-%j')
    # Day 366 of a common year rolls over into the next year
    if parsed is None or parsed.year != int(text[:4]):
        return None
    return parsed


def _parse_month_day(text: str) -> Optional[datetime]:
    year = datetime.now().year
    month, day = text[2:4], text[5:7]
    if month == '02' and day == '29' and not calendar.isleap(year):
        day = '28'
    return _strptime(f"{year}-{month}-{day}", '%Y-%m-%d')


def _parse_log_date(text: str) -> Optional[datetime]:
    # 17/May/2015:08:05:32 +0000
    month = MONTH_ABBREVIATIONS.get(text[3:6].title())
    if month is None:
        return None
    return _strptime(f"{text[:3]}{month}{text[6:]}", LOG_DATE_FORMAT)


DATE_FORMATS: Tuple[Tuple[re.Pattern, Callable[[str], Optional[datetime]]], ...] = (
    (re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}'), _parse_offset_date_time),
    (re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z'), _parse_zoned_date_time),
    (re.compile(r'\d{8}T\d{6}Z'), _parse_basic_date_time),
    (re.compile(r'\d{4}-\d{2}-\d{2}'), _parse_local_date),
    (re.compile(r'\d{4}-W\d{2}(-\d)?'), _parse_week_date),
    (re.compile(r'\d{4}-\d{3}'), _parse_ordinal_date),
    (re.compile(r'--\d{2}-\d{2}'), _parse_month_day),
    (re.compile(r'\d{2}/[A-Za-z]{3}/\d{4}:\d{2}:\d{2}:\d{2} [+-]\d{4}'), _parse_log_date),
)


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """
    Parse a date string into a naive datetime.

    Supported forms, tried in order:
        2024-05-17T08:05:32+03:00, 2024-05-17T08:05:32Z, 20240517T080532Z,
        2024-05-17, 2024-W20, 2024-W20-5, 2024-138, --05-17,
        17/May/2024:08:05:32 +0000

    Args:
        text: Date string

    Returns:
        datetime (local wall-clock time, offset discarded) or None when the
        string is not recognized or is not a valid date
    """
    if text is None:
        return None
    text = text.strip()
    for pattern, formatter in DATE_FORMATS:
        if pattern.fullmatch(text):
            return formatter(text)
    return None


def is_within_range(timestamp: datetime,
                    from_date: Optional[datetime] = None,
                    to_date: Optional[datetime] = None) -> bool:
    """Inclusive range check; a missing bound does not restrict."""
    return ((from_date is None or timestamp >= from_date)
            and (to_date is None or timestamp <= to_date))


def describe_formats() -> List[str]:
    """Example of every accepted date form, for CLI help text."""
    return [
        '2024-05-17T08:05:32+03:00',
        '2024-05-17T08:05:32Z',
        '20240517T080532Z',
        '2024-05-17',
        '2024-W20[-5]',
        '2024-138',
        '--05-17',
        '17/May/2024:08:05:32 +0000',
    ]
