"""
Utility functions for log processing
"""

from .colors import Colors
from .config_loader import load_config, merge_settings
from .date_utils import parse_timestamp, is_within_range

__all__ = ['Colors', 'load_config', 'merge_settings', 'parse_timestamp', 'is_within_range']
