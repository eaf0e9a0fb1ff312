"""
HTTP(S) log source
"""

import codecs
import http.client
import sys
from typing import Iterator
from urllib import error, request

from .base import BaseSource
from ..utils.colors import Colors

USER_AGENT = 'log-report/1.0 (+urllib.request)'


class UrlSource(BaseSource):
    """Log lines streamed from the body of an HTTP GET response."""

    def __init__(self, url: str, timeout: float = 10, encoding: str = 'utf-8'):
        super().__init__(url, encoding)
        self.url = url
        self.timeout = timeout

    def lines(self) -> Iterator[str]:
        req = request.Request(self.url, method='GET', headers={'User-Agent': USER_AGENT})
        try:
            with request.urlopen(req, timeout=self.timeout) as resp:
                status = getattr(resp, 'status', 200)
                if not 200 <= status < 300:
                    print(f"{Colors.YELLOW}Warning: {self.url} returned HTTP {status}{Colors.NC}",
                          file=sys.stderr)
                    return
                reader = codecs.getreader(self.encoding)(resp, errors='ignore')
                for line in reader:
                    yield line
        except error.HTTPError as e:
            print(f"{Colors.YELLOW}Warning: {self.url} returned HTTP {e.code}{Colors.NC}", file=sys.stderr)
        except (error.URLError, http.client.HTTPException, OSError, ValueError) as e:
            # URLError covers DNS failures, refused connections and timeouts,
            # HTTPException malformed responses such as a bad status line
            print(f"{Colors.YELLOW}Warning: Error fetching {self.url}: {e}{Colors.NC}", file=sys.stderr)
