"""
Log aggregation modules
"""

from .aggregator import LogAggregator, compile_agent_filter, matches_agent
from .percentile import percentile, percentile95
from .statistics import CollectedStatistics

__all__ = [
    'LogAggregator',
    'CollectedStatistics',
    'compile_agent_filter',
    'matches_agent',
    'percentile',
    'percentile95'
]
