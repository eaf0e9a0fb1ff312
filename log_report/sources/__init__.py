"""
Log source modules
"""

from .base import BaseSource
from .file_source import FileSource
from .url_source import UrlSource
from .s3_source import S3Source
from .source_resolver import resolve_sources, find_matching_files, is_valid_url

__all__ = ['BaseSource', 'FileSource', 'UrlSource', 'S3Source',
           'resolve_sources', 'find_matching_files', 'is_valid_url']
