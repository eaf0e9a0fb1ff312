"""
Source resolver - turns a --path locator into log sources
"""

import os
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import urlparse

from .base import BaseSource
from .file_source import FileSource
from .s3_source import S3Source
from .url_source import UrlSource
from ..utils.colors import Colors

WILDCARD_CHARS = ('*', '?')


def is_valid_url(locator: str) -> bool:
    """True for URLs with a supported scheme and a host."""
    try:
        parsed = urlparse(locator)
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https', 's3') and bool(parsed.netloc)


def glob_to_regex(pattern: str) -> re.Pattern:
    """
    Translate a path glob into a regex.

    '**' matches across directories, '*' within a single path segment and
    '?' exactly one character other than '/'.
    """
    parts = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if pattern.startswith('**/', i):
            parts.append('(?:.*/)?')
            i += 3
            continue
        if pattern.startswith('**', i):
            parts.append('.*')
            i += 2
            continue
        if char == '*':
            parts.append('[^/]*')
        elif char == '?':
            parts.append('[^/]')
        else:
            parts.append(re.escape(char))
        i += 1
    return re.compile(''.join(parts))


def _walk_root(full_pattern: str) -> Path:
    """Longest wildcard-free directory prefix of the pattern."""
    segments = full_pattern.split('/')[:-1]
    static = []
    for segment in segments:
        if any(c in segment for c in WILDCARD_CHARS):
            break
        static.append(segment)
    if not static:
        return Path('.')
    if static == ['']:
        return Path('/')
    return Path('/'.join(static))


def find_matching_files(pattern: str, logs_root: str = '.') -> List[Path]:
    """
    Walk the directory tree once and collect every file matching the glob.

    Args:
        pattern: Glob pattern, relative to logs_root unless absolute
        logs_root: Base logs directory

    Returns:
        Matching paths in directory traversal order
    """
    full_pattern = (Path(logs_root) / pattern).as_posix()
    matcher = glob_to_regex(full_pattern)
    root = _walk_root(full_pattern)

    if not root.is_dir():
        print(f"{Colors.YELLOW}Warning: Log directory does not exist or is not accessible: {root}{Colors.NC}",
              file=sys.stderr)
        return []

    def on_error(e: OSError):
        print(f"{Colors.YELLOW}Warning: Impossible to reach {e.filename}: {e.strerror}{Colors.NC}",
              file=sys.stderr)

    matches = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=on_error):
        for filename in filenames:
            file_path = Path(dirpath) / filename
            if matcher.fullmatch(file_path.as_posix()) and file_path.is_file():
                matches.append(file_path)

    if not matches:
        print(f"{Colors.YELLOW}Warning: No log files found matching: {full_pattern}{Colors.NC}", file=sys.stderr)
    return matches


def resolve_sources(locator: str, settings: Optional[Dict] = None) -> List[BaseSource]:
    """
    Resolve a locator (URL, s3:// URI or glob pattern) into log sources.

    Args:
        locator: User-supplied path, glob pattern or URL
        settings: Analyzer settings (see config_loader.DEFAULT_SETTINGS)

    Returns:
        List of sources; empty when nothing could be found
    """
    settings = settings or {}
    encoding = settings.get('encoding', 'utf-8')

    if is_valid_url(locator):
        if urlparse(locator).scheme == 's3':
            profile = (settings.get('s3') or {}).get('profile')
            return [S3Source(locator, profile=profile, encoding=encoding)]
        return [UrlSource(locator, timeout=settings.get('http_timeout', 10), encoding=encoding)]

    logs_root = settings.get('logs_root', '.')
    return [FileSource(path, encoding=encoding) for path in find_matching_files(locator, logs_root)]
