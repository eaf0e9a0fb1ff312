"""
Log aggregator - streams sources, filters entries and collects statistics
"""

import re
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from .statistics import CollectedStatistics
from ..parse.log_parser import LogRecord, parse_log_line
from ..sources.base import BaseSource
from ..sources.source_resolver import resolve_sources
from ..utils.date_utils import is_within_range


def compile_agent_filter(agent_filter: str) -> re.Pattern:
    """'*' matches any sequence of characters, everything else is literal."""
    return re.compile('.*'.join(re.escape(part) for part in agent_filter.split('*')))


def matches_agent(user_agent: str, agent_filter: Optional[str],
                  agent_pattern: Optional[re.Pattern] = None) -> bool:
    """True if the user agent matches the glob-style filter or equals it literally."""
    if agent_filter is None:
        return True
    if agent_pattern is None:
        agent_pattern = compile_agent_filter(agent_filter)
    return bool(agent_pattern.fullmatch(user_agent)) or user_agent == agent_filter


class LogAggregator:
    """Aggregates access log sources into CollectedStatistics."""

    def __init__(self, settings: Optional[Dict] = None, max_workers: Optional[int] = None,
                 strict: bool = False):
        """
        Initialize aggregator.

        Args:
            settings: Analyzer settings used to resolve locators
            max_workers: Number of sources processed concurrently (default from settings, 1)
            strict: Raise LogParseError on malformed lines instead of skipping them
        """
        self.settings = settings or {}
        self.max_workers = max_workers or self.settings.get('max_workers', 1) or 1
        self.strict = strict
        self.processed_files: List[str] = []

    def analyze(self, locator: str,
                from_date: Optional[datetime] = None,
                to_date: Optional[datetime] = None,
                agent_filter: Optional[str] = None) -> CollectedStatistics:
        """Resolve a --path locator and aggregate every source it yields."""
        sources = resolve_sources(locator, self.settings)
        return self.run(sources, from_date, to_date, agent_filter)

    def run(self, sources: Iterable[BaseSource],
            from_date: Optional[datetime] = None,
            to_date: Optional[datetime] = None,
            agent_filter: Optional[str] = None) -> CollectedStatistics:
        """
        Stream every line of every source into one statistics object.

        Args:
            sources: Log sources, processed in order
            from_date: Inclusive lower bound (None = unbounded)
            to_date: Inclusive upper bound (None = unbounded)
            agent_filter: User agent pattern, '*' as wildcard (None = no filter)

        Returns:
            Finalized CollectedStatistics
        """
        sources = list(sources)
        agent_pattern = compile_agent_filter(agent_filter) if agent_filter is not None else None

        def collect(source: BaseSource, stats: Optional[CollectedStatistics] = None) -> CollectedStatistics:
            if stats is None:
                stats = CollectedStatistics()
            for line in source.lines():
                record = parse_log_line(line, strict=self.strict)
                if record is not None and self._accepts(record, from_date, to_date,
                                                        agent_filter, agent_pattern):
                    stats.add(record.entry)
            return stats

        statistics = CollectedStatistics()
        if self.max_workers > 1 and len(sources) > 1:
            # Per-source totals merged in source order give the sequential result
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                for source, partial in zip(sources, executor.map(collect, sources)):
                    self.processed_files.append(source.name)
                    statistics.merge(partial)
        else:
            for source in sources:
                self.processed_files.append(source.name)
                collect(source, statistics)

        return statistics.finalize()

    @staticmethod
    def _accepts(record: LogRecord,
                 from_date: Optional[datetime],
                 to_date: Optional[datetime],
                 agent_filter: Optional[str],
                 agent_pattern: Optional[re.Pattern]) -> bool:
        return (is_within_range(record.timestamp, from_date, to_date)
                and matches_agent(record.user_agent, agent_filter, agent_pattern))
