#!/usr/bin/env python3
"""
Access Log Report
CLI entry point for aggregating access logs into a Markdown/AsciiDoc report
"""

import argparse
import sys
from pathlib import Path

# Add log_report to path for imports (go up one level from scripts/ to root)
sys.path.insert(0, str(Path(__file__).parent.parent))

from log_report.analyze.aggregator import LogAggregator
from log_report.report.markup import resolve_style
from log_report.report.report_generator import LogReportGenerator
from log_report.utils.colors import Colors
from log_report.utils.config_loader import load_config
from log_report.utils.date_utils import describe_formats, parse_timestamp

AGENT_FILTER = 'agent'


def parse_bound(value, option):
    """Parse a --from/--to value; unparseable dates mean no bound."""
    if value is None:
        return None
    parsed = parse_timestamp(value)
    if parsed is None:
        print(f"{Colors.YELLOW}Warning: Unrecognized date for {option}: {value} (ignored){Colors.NC}",
              file=sys.stderr)
    return parsed


def main():
    parser = argparse.ArgumentParser(
        description="Aggregate access logs into a Markdown or AsciiDoc report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Every log file under logs/
  %(prog)s --path 'logs/**/*.log'

  # Date range and AsciiDoc output
  %(prog)s --path logs/access.log --from 2024-05-17 --to 2024-W30 --format adoc

  # Only Debian package manager traffic, from a remote log
  %(prog)s --path https://example.com/access.log --filter-field agent --filter-value 'Debian*'

Accepted date forms: {', '.join(describe_formats())}
        """
    )
    parser.add_argument("--path", type=str, required=True,
                        help="Log file, glob pattern (relative to logs_root) or http(s)/s3 URL")
    parser.add_argument("--from", dest="from_date", type=str, help="Inclusive start date (ISO 8601)")
    parser.add_argument("--to", dest="to_date", type=str, help="Inclusive end date (ISO 8601)")
    parser.add_argument("--filter-field", type=str, help="Field to filter on (only 'agent' is supported)")
    parser.add_argument("--filter-value", type=str, help="Filter pattern, '*' matches any characters")
    parser.add_argument("--format", type=str, default="markdown", help="Report format: markdown or adoc")
    parser.add_argument("--config", type=str, help="Path to configuration file (default: config/analyzer.yaml)")
    parser.add_argument("--workers", type=int, help="Number of sources processed concurrently")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed log lines instead of skipping them")

    args = parser.parse_args()

    # Load configuration
    config_path = Path(args.config) if args.config else None
    settings = load_config(config_path)

    from_date = parse_bound(args.from_date, '--from')
    to_date = parse_bound(args.to_date, '--to')

    agent_filter = None
    if args.filter_field is not None:
        if args.filter_field.lower() == AGENT_FILTER:
            agent_filter = args.filter_value
        else:
            print(f"{Colors.YELLOW}Warning: Such a filter doesn't exist: {args.filter_field}{Colors.NC}",
                  file=sys.stderr)

    print(f"{Colors.GREEN}Analyzing logs...{Colors.NC}")
    print(f"Path: {args.path}")
    print(f"Date Range: {from_date or '-'} to {to_date or '-'}")
    if agent_filter is not None:
        print(f"Agent Filter: {agent_filter}")
    print()

    aggregator = LogAggregator(settings, max_workers=args.workers, strict=args.strict)
    stats = aggregator.analyze(args.path, from_date, to_date, agent_filter)

    print(f"{Colors.BLUE}Processed {len(aggregator.processed_files)} source(s){Colors.NC}")
    for name in aggregator.processed_files:
        print(f"  {name}")
    print(f"Total requests: {stats.total_requests:,}")

    generator = LogReportGenerator(
        style=resolve_style(args.format),
        from_date=from_date,
        to_date=to_date,
        output_dir=Path(settings['output_dir']),
        report_name=settings['report_name'],
    )
    # A failed write is reported by the generator as a warning, not as an error
    output_path = generator.generate_report(aggregator.processed_files, stats)
    if output_path is not None:
        print(f"\n{Colors.GREEN}Report saved to {output_path}{Colors.NC}")
    sys.exit(0)


if __name__ == "__main__":
    main()
