"""
S3 log source
"""

import codecs
import gzip
import sys
from typing import Iterator, Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .base import BaseSource
from ..utils.colors import Colors


class S3Source(BaseSource):
    """Log lines streamed from a single S3 object (s3://bucket/key)."""

    def __init__(self, s3_uri: str, profile: Optional[str] = None, encoding: str = 'utf-8'):
        super().__init__(s3_uri, encoding)
        self.bucket_name, self.key = self._parse_s3_uri(s3_uri)
        self.profile = profile
        self.s3_client = None

    @staticmethod
    def _parse_s3_uri(s3_uri: str) -> Tuple[str, str]:
        """Parse S3 URI into bucket name and key."""
        s3_uri = s3_uri.replace("s3://", "", 1)
        parts = s3_uri.split("/", 1)
        bucket_name = parts[0]
        key = parts[1] if len(parts) > 1 else ""
        return bucket_name, key

    def _create_s3_client(self):
        """Create S3 client with optional profile."""
        if self.profile:
            session = boto3.Session(profile_name=self.profile)
            return session.client('s3')
        else:
            return boto3.client('s3')

    def lines(self) -> Iterator[str]:
        try:
            if self.s3_client is None:
                self.s3_client = self._create_s3_client()
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=self.key)
            body = response['Body']
            try:
                stream = gzip.GzipFile(fileobj=body) if self.key.endswith('.gz') else body
                reader = codecs.getreader(self.encoding)(stream, errors='ignore')
                for line in reader:
                    yield line
            finally:
                body.close()
        except (ClientError, BotoCoreError) as e:
            print(f"{Colors.YELLOW}Warning: Error reading {self.name}: {e}{Colors.NC}", file=sys.stderr)
