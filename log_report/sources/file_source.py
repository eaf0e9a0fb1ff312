"""
Local file log source
"""

import gzip
import sys
from pathlib import Path
from typing import Iterator

from .base import BaseSource
from ..utils.colors import Colors


class FileSource(BaseSource):
    """Log lines read from a plain or gzip-compressed local file."""

    def __init__(self, file_path: Path, encoding: str = 'utf-8'):
        super().__init__(str(file_path), encoding)
        self.file_path = Path(file_path)

    def _open(self):
        if self.file_path.suffix == '.gz':
            return gzip.open(self.file_path, 'rt', encoding=self.encoding, errors='ignore')
        return open(self.file_path, 'r', encoding=self.encoding, errors='ignore')

    def lines(self) -> Iterator[str]:
        try:
            with self._open() as f:
                for line in f:
                    yield line
        except (OSError, EOFError) as e:
            print(f"{Colors.YELLOW}Warning: Error reading {self.file_path}: {e}{Colors.NC}", file=sys.stderr)
