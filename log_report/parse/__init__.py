"""
Log parsing modules
"""

from .log_parser import LogEntry, LogRecord, LogParseError, parse_log_line

__all__ = ['LogEntry', 'LogRecord', 'LogParseError', 'parse_log_line']
