"""
Log report generator
Renders collected statistics as Markdown or AsciiDoc and writes log_report.*
"""

import sys
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .markup import (
    ASCIIDOC,
    ASCIIDOC_HEADER,
    ASCIIDOC_TABLE,
    FILE_EXTENSIONS,
    MARKDOWN_HEADER,
    MARKDOWN_SEPARATOR_2,
    MARKDOWN_SEPARATOR_3,
    resolve_style,
    response_code_name,
)
from ..analyze.statistics import CollectedStatistics
from ..utils.colors import Colors

GENERAL_INFORMATION = 'General Information'
REQUESTED_RESOURCES = 'Requested resources'
RESPONSE_CODES = 'Response codes'
DEFAULT_REPORT_NAME = 'log_report'


def frequency_table(counter: Counter, key_column: str) -> pd.DataFrame:
    """Counter as a two-column DataFrame sorted by descending amount."""
    df = pd.DataFrame(list(counter.items()), columns=[key_column, 'amount'])
    return df.sort_values('amount', ascending=False, kind='stable').reset_index(drop=True)


def _format_date(date: Optional[datetime]) -> str:
    # 2024-05-17T00:00 when seconds are zero, 2024-05-17T08:05:32 otherwise
    if date is None:
        return '-'
    if date.second == 0 and date.microsecond == 0:
        return date.isoformat(timespec='minutes')
    return date.isoformat()


class LogReportGenerator:
    """Formats CollectedStatistics into a report file."""

    def __init__(self, style: Optional[str] = None,
                 from_date: Optional[datetime] = None,
                 to_date: Optional[datetime] = None,
                 output_dir: Path = Path('.'),
                 report_name: str = DEFAULT_REPORT_NAME):
        """
        Initialize report generator.

        Args:
            style: Style token ('markdown', 'adoc', ...); unknown tokens fall back to Markdown
            from_date: Lower date bound shown in the report
            to_date: Upper date bound shown in the report
            output_dir: Directory the report is written to
            report_name: File name without extension
        """
        self.style = resolve_style(style)
        self.from_date = from_date
        self.to_date = to_date
        self.output_dir = Path(output_dir)
        self.report_name = report_name

    @property
    def output_path(self) -> Path:
        return self.output_dir / f"{self.report_name}{FILE_EXTENSIONS[self.style]}"

    def render(self, file_names: List[str], stats: CollectedStatistics) -> str:
        """Render the report text in the configured style."""
        if self.style == ASCIIDOC:
            lines = self._render_asciidoc(file_names, stats)
        else:
            lines = self._render_markdown(file_names, stats)
        return '\n'.join(lines) + '\n'

    def generate_report(self, file_names: List[str], stats: CollectedStatistics) -> Optional[Path]:
        """
        Render the report and write it, overwriting any previous report.

        Returns:
            Path of the written file, or None if it could not be written
        """
        report = self.render(file_names, stats)
        output_path = self.output_path
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(report)
        except OSError as e:
            print(f"{Colors.YELLOW}Warning: Error writing report to {output_path}: {e}{Colors.NC}",
                  file=sys.stderr)
            return None
        return output_path

    def _general_rows(self, stats: CollectedStatistics):
        return [
            ('Number of requests', f"{stats.total_requests:,}"),
            ('Average response size', f"{stats.average_response_size:,} b"),
            ('95p answer size', f"{stats.percentile:.2f} b"),
            ('Most frequent IP', stats.most_frequent_ip()),
            ('Most frequent user', stats.most_frequent_user()),
        ]

    def _render_markdown(self, file_names: List[str], stats: CollectedStatistics) -> List[str]:
        lines = [
            f"{MARKDOWN_HEADER} {GENERAL_INFORMATION}",
            '',
            '| Metrics | Value |',
            MARKDOWN_SEPARATOR_2,
            f"| File(-s) | `{', '.join(file_names)}` |",
            f"| From date | {_format_date(self.from_date)} |",
            f"| To date | {_format_date(self.to_date)} |",
        ]
        lines += [f"| {name} | {value} |" for name, value in self._general_rows(stats)]

        lines += ['', f"{MARKDOWN_HEADER} {REQUESTED_RESOURCES}", '',
                  '| Resource | Amount |', MARKDOWN_SEPARATOR_2]
        for row in frequency_table(stats.resource_frequency, 'resource').itertuples(index=False):
            lines.append(f"| {row.resource} | {int(row.amount):,} |")

        lines += ['', f"{MARKDOWN_HEADER} {RESPONSE_CODES}", '',
                  '| Code | Name | Amount |', MARKDOWN_SEPARATOR_3]
        for row in frequency_table(stats.response_codes, 'code').itertuples(index=False):
            lines.append(f"| {row.code} | {response_code_name(row.code)} | {int(row.amount):,} |")
        return lines

    def _render_asciidoc(self, file_names: List[str], stats: CollectedStatistics) -> List[str]:
        lines = [
            f"{ASCIIDOC_HEADER} {GENERAL_INFORMATION}",
            ASCIIDOC_TABLE,
            '| Metrics | Value',
            '',
            f"| File(-s) | {', '.join(file_names)}",
            f"| From date | {_format_date(self.from_date)}",
            f"| To date | {_format_date(self.to_date)}",
        ]
        lines += [f"| {name} | {value}" for name, value in self._general_rows(stats)]
        lines.append(ASCIIDOC_TABLE)

        lines += ['', f"{ASCIIDOC_HEADER} {REQUESTED_RESOURCES}", ASCIIDOC_TABLE, '| Resource | Amount', '']
        for row in frequency_table(stats.resource_frequency, 'resource').itertuples(index=False):
            lines.append(f"| {row.resource} | {int(row.amount):,}")
        lines.append(ASCIIDOC_TABLE)

        lines += ['', f"{ASCIIDOC_HEADER} {RESPONSE_CODES}", ASCIIDOC_TABLE, '| Code | Name | Amount', '']
        for row in frequency_table(stats.response_codes, 'code').itertuples(index=False):
            lines.append(f"| {row.code} | {response_code_name(row.code)} | {int(row.amount):,}")
        lines.append(ASCIIDOC_TABLE)
        return lines
