"""Abstract base class for HTML fetchers."""

import hashlib
import logging
from abc import ABC, abstractmethod
from urllib.parse import urlparse

from newsgrid.core.fetcher.throttle import FixedDelay, RateLimiter
from newsgrid.core.selection import Document
from newsgrid.models.results import FetchResult
from newsgrid.utils.exceptions import ParseError


def snapshot_filename(url: str) -> str:
    """Build the file name a page snapshot is stored under.

    Args:
        url: URL of the page

    Returns:
        File name made of the domain and a short hash of the full URL

    """
    domain = urlparse(url).netloc.replace('www.', '').replace('.', '_').replace(':', '_')
    url_hash = hashlib.md5(url.encode()).hexdigest()[:8]
    return f'{domain}_{url_hash}.html'


class HTMLFetcher(ABC):
    """Abstract base class for HTML fetchers.

    Every call to fetch_html, successful or not, ends with the rate limiter's
    pause before control returns to the caller. Subclasses only implement
    _retrieve.

    Attributes:
        rate_limiter: Politeness delay applied after each request
        logger: Logger instance

    """

    def __init__(self, rate_limiter: RateLimiter | None = None):
        """Initialize the fetcher.

        Args:
            rate_limiter: Politeness delay after each request. Defaults to FixedDelay(2.0).

        """
        self.rate_limiter = rate_limiter or FixedDelay()
        self.logger = logging.getLogger(__name__)

    @abstractmethod
    def _retrieve(self, url: str) -> FetchResult:
        """Retrieve the raw page at a URL.

        Args:
            url: URL to fetch

        Returns:
            FetchResult with the response body and status

        Raises:
            NetworkError: If the page could not be retrieved

        """
        pass

    def fetch_html(self, url: str) -> FetchResult:
        """Fetch the raw HTML of a URL, then wait for the politeness delay.

        Args:
            url: URL to fetch

        Returns:
            FetchResult with HTML, status and timing

        Raises:
            NetworkError: If the page could not be retrieved

        """
        self.rate_limiter.mark()
        try:
            return self._retrieve(url)
        finally:
            self.rate_limiter.wait()

    def fetch(self, url: str) -> Document:
        """Fetch a URL and parse it into a Document.

        Args:
            url: URL to fetch

        Returns:
            The parsed Document

        Raises:
            NetworkError: If the page could not be retrieved
            ParseError: If the body is not HTML

        """
        result = self.fetch_html(url)

        if not result.is_html:
            raise ParseError(url, f'unexpected content type {result.content_type!r}')

        return Document.parse(result.html, url=result.url)

    def close(self) -> None:
        """Release any resources held by the fetcher."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
