"""
Collected statistics for one analysis run
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from .percentile import percentile95
from ..parse.log_parser import LogEntry


@dataclass
class CollectedStatistics:
    """
    Running totals built while streaming log entries.

    Every entry adds exactly one resource and one response code, so
    total_requests == sum(resource_frequency.values()) == sum(response_codes.values())
    and total_response_size == sum(response_sizes).
    """
    total_requests: int = 0
    resource_frequency: Counter = field(default_factory=Counter)
    response_codes: Counter = field(default_factory=Counter)
    total_response_size: int = 0
    response_sizes: List[int] = field(default_factory=list)
    ips: Counter = field(default_factory=Counter)
    users: Counter = field(default_factory=Counter)
    percentile: float = 0.0
    finalized: bool = False

    def add(self, entry: LogEntry) -> None:
        """Count one log entry."""
        self.total_requests += 1
        self.resource_frequency[entry.resource] += 1
        self.response_codes[entry.status_code] += 1
        self.ips[entry.ip] += 1
        self.users[entry.user] += 1
        self.total_response_size += entry.response_size
        self.response_sizes.append(entry.response_size)

    def merge(self, other: 'CollectedStatistics') -> None:
        """Fold another (unfinalized) run into this one; sizes are appended after ours."""
        self.total_requests += other.total_requests
        self.resource_frequency.update(other.resource_frequency)
        self.response_codes.update(other.response_codes)
        self.ips.update(other.ips)
        self.users.update(other.users)
        self.total_response_size += other.total_response_size
        self.response_sizes.extend(other.response_sizes)

    def finalize(self) -> 'CollectedStatistics':
        """Compute the 95th percentile once all entries have been added."""
        if self.finalized:
            raise RuntimeError("Statistics have already been finalized")
        self.percentile = percentile95(self.response_sizes)
        self.finalized = True
        return self

    @property
    def average_response_size(self) -> int:
        if self.total_requests == 0:
            return 0
        return self.total_response_size // self.total_requests

    def most_frequent_ip(self) -> str:
        return _most_common_key(self.ips) or ''

    def most_frequent_user(self) -> str:
        return _most_common_key(self.users) or ''


def _most_common_key(counter: Counter) -> Optional[str]:
    # Ties resolve to whichever key Counter.most_common returns first
    top = counter.most_common(1)
    return top[0][0] if top else None
