"""Simple HTTP fetcher built on requests."""

import time
from pathlib import Path

import requests

from newsgrid.core.fetcher.base import HTMLFetcher, snapshot_filename
from newsgrid.core.fetcher.throttle import RateLimiter
from newsgrid.models.results import FetchResult
from newsgrid.utils.exceptions import NetworkError
from newsgrid.utils.headers import HeaderGenerator


class SimpleFetcher(HTMLFetcher):
    """Blocking HTTP GET fetcher.

    Sends anonymous requests with plain browser headers. There is no retry:
    any transport failure or non-2xx status raises NetworkError.

    Attributes:
        timeout: Request timeout in seconds
        user_agent: User agent announced to the server
        session: Requests session instance if use_session is True
        record_dir: Directory that every fetched page is also saved to, if set

    """

    def __init__(
        self,
        rate_limiter: RateLimiter | None = None,
        timeout: int = 30,
        use_session: bool = True,
        user_agent: str | None = None,
        record_dir: str | Path | None = None,
    ):
        """Initialize the simple fetcher.

        Args:
            rate_limiter: Politeness delay after each request. Defaults to FixedDelay(2.0).
            timeout: Request timeout in seconds. Defaults to 30.
            use_session: If True reuse one requests.Session for connection pooling
            user_agent: User agent to announce. Defaults to a desktop Chrome agent.
            record_dir: If set, save every fetched page there for offline replay

        """
        super().__init__(rate_limiter)
        self.timeout = timeout
        self.user_agent = user_agent
        self.record_dir = Path(record_dir) if record_dir else None

        self.session: requests.Session | None
        if use_session:
            self.session = requests.Session()
        else:
            self.session = None

    def _retrieve(self, url: str) -> FetchResult:
        start_time = time.time()
        headers = HeaderGenerator.generate_headers(user_agent=self.user_agent)

        try:
            if self.session:
                response = self.session.get(url, headers=headers, timeout=self.timeout, allow_redirects=True)
            else:
                response = requests.get(url, headers=headers, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            self.logger.error(f'Request to {url} failed: {e}')
            raise NetworkError(url, str(e)) from e

        status_code = response.status_code
        if not 200 <= status_code < 300:
            self.logger.error(f'Request to {url} returned HTTP {status_code}')
            raise NetworkError(url, f'HTTP {status_code} {response.reason or ""}'.strip(), status_code=status_code)

        html = response.text
        fetch_time = time.time() - start_time
        self.logger.info(f'Fetched {url} ({len(html):,} chars, {fetch_time:.2f}s)')

        if self.record_dir:
            self._record(url, html)

        return FetchResult(
            url=url,
            html=html,
            status_code=status_code,
            content_type=response.headers.get('Content-Type'),
            fetch_time=fetch_time,
        )

    def _record(self, url: str, html: str) -> None:
        """Save a fetched page so it can be replayed by SnapshotFetcher."""
        self.record_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.record_dir / snapshot_filename(url)
        filepath.write_text(html, encoding='utf-8')
        self.logger.debug(f'Recorded {url} to {filepath}')

    def close(self) -> None:
        """Close the session if it exists."""
        if self.session:
            self.session.close()
