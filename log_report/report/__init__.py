"""
Report rendering modules
"""

from .markup import resolve_style, response_code_name
from .report_generator import LogReportGenerator, frequency_table

__all__ = ['LogReportGenerator', 'frequency_table', 'resolve_style', 'response_code_name']
