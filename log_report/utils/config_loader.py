"""
Configuration loading utilities
"""

import copy
import sys
import yaml
from pathlib import Path
from typing import Dict, Optional

from .colors import Colors

# Default config path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "analyzer.yaml"

DEFAULT_SETTINGS = {
    'logs_root': '.',
    'output_dir': '.',
    'report_name': 'log_report',
    'http_timeout': 10,
    'max_workers': 1,
    'encoding': 'utf-8',
    's3': {'profile': None},
}


def load_config(config_path: Optional[Path] = None) -> Dict:
    """Load analyzer settings from YAML file, merged over the built-in defaults."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.exists():
            return copy.deepcopy(DEFAULT_SETTINGS)

    if not config_path.exists():
        print(f"{Colors.RED}Error: Configuration file not found: {config_path}{Colors.NC}", file=sys.stderr)
        print(f"Please create {config_path} with an 'analyzer' section.", file=sys.stderr)
        sys.exit(1)

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)

        if not config or 'analyzer' not in config:
            print(f"{Colors.RED}Error: Invalid configuration file format{Colors.NC}", file=sys.stderr)
            sys.exit(1)

        return merge_settings(config['analyzer'] or {})
    except yaml.YAMLError as e:
        print(f"{Colors.RED}Error: Failed to parse configuration file: {e}{Colors.NC}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"{Colors.RED}Error: Failed to load configuration: {e}{Colors.NC}", file=sys.stderr)
        sys.exit(1)


def merge_settings(overrides: Dict) -> Dict:
    """Overlay user settings on DEFAULT_SETTINGS (one level deep for nested sections)."""
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(settings.get(key), dict):
            settings[key].update(value)
        else:
            settings[key] = value
    return settings
