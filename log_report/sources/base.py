"""
Base log source class/interface
"""

from abc import ABC, abstractmethod
from typing import Iterator


class BaseSource(ABC):
    """Base class for a readable stream of log lines."""

    def __init__(self, name: str, encoding: str = 'utf-8'):
        """
        Initialize source instance.

        Args:
            name: Display name of the source (file path or URL)
            encoding: Text encoding of the log lines
        """
        self.name = name
        self.encoding = encoding

    @abstractmethod
    def lines(self) -> Iterator[str]:
        """
        Yield the lines of the source lazily.

        Implementations keep the underlying handle open only while iterating
        and report read failures as warnings instead of raising.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
