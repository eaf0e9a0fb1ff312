"""
Access Log Parser
Parses combined-log-style access log lines into structured records.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..utils.date_utils import parse_timestamp


# Combined log format regex pattern
# Format: IP - USER [timestamp] "METHOD path protocol" status size "referrer" "user-agent"
LOG_PATTERN = re.compile(
    r'^(\S+) - (\S+)'  # IP address and remote user
    r' \[([^]]+)] '  # Timestamp
    r'"([^"]+)"'  # Request line
    r' (\d{3})'  # Status code
    r' (\d+)'  # Response size
    r' "([^"]*)"'  # Referrer
    r' "([^"]*)"$'  # User agent
)


class LogParseError(ValueError):
    """Raised in strict mode for lines that do not follow the log format."""


@dataclass(frozen=True)
class LogEntry:
    """The fields of one request that end up in the report."""
    ip: str
    user: str
    resource: str
    status_code: str
    response_size: int


@dataclass(frozen=True)
class LogRecord:
    """A fully parsed log line, including the fields only used for filtering."""
    ip: str
    user: str
    timestamp: datetime
    resource: str
    status_code: str
    response_size: int
    referrer: str
    user_agent: str

    @property
    def entry(self) -> LogEntry:
        return LogEntry(self.ip, self.user, self.resource, self.status_code, self.response_size)


def parse_log_line(line: str, strict: bool = False) -> Optional[LogRecord]:
    """
    Parse a single log line and return structured data.

    Args:
        line: Raw log line string
        strict: Raise LogParseError instead of returning None for bad lines

    Returns:
        LogRecord, or None if the line is empty, does not match the format,
        the request has no path or the timestamp cannot be parsed
    """
    line = line.rstrip('\r\n')
    if not line.strip():
        return None

    match = LOG_PATTERN.match(line)
    if not match:
        if strict:
            raise LogParseError(f"Line does not match the log format: {line!r}")
        return None

    ip, user, timestamp_str, request, status, size, referrer, user_agent = match.groups()

    timestamp = parse_timestamp(timestamp_str)
    if timestamp is None:
        if strict:
            raise LogParseError(f"Invalid timestamp: {timestamp_str!r}")
        return None

    # "GET /downloads/product_1 HTTP/1.1" -> "/downloads/product_1"
    request_parts = request.split(' ')
    if len(request_parts) < 2:
        if strict:
            raise LogParseError(f"Request has no resource: {request!r}")
        return None

    return LogRecord(
        ip=ip,
        user=user,
        timestamp=timestamp,
        resource=request_parts[1],
        status_code=status,
        response_size=int(size),
        referrer=referrer,
        user_agent=user_agent,
    )
