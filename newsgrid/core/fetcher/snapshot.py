"""Fetcher that replays pages saved to disk."""

from pathlib import Path

from newsgrid.core.fetcher.base import HTMLFetcher, snapshot_filename
from newsgrid.core.fetcher.throttle import FixedDelay, RateLimiter
from newsgrid.models.results import FetchResult
from newsgrid.utils.exceptions import NetworkError


class SnapshotFetcher(HTMLFetcher):
    """Serves pages from a directory of saved HTML files.

    Files are looked up by snapshot_filename(url), the same names SimpleFetcher
    writes when recording. A missing snapshot behaves like an unreachable page.

    Attributes:
        snapshots_dir: Directory holding the saved pages

    """

    def __init__(self, snapshots_dir: str | Path, rate_limiter: RateLimiter | None = None):
        """Initialize the snapshot fetcher.

        Args:
            snapshots_dir: Directory holding the saved pages
            rate_limiter: Delay after each read. Defaults to no delay.

        """
        super().__init__(rate_limiter or FixedDelay(0))
        self.snapshots_dir = Path(snapshots_dir)

    def save(self, url: str, html: str) -> Path:
        """Save a page under the name it will be replayed from.

        Args:
            url: URL of the page
            html: HTML of the page

        Returns:
            Path of the written file

        """
        self.snapshots_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.snapshots_dir / snapshot_filename(url)
        filepath.write_text(html, encoding='utf-8')
        return filepath

    def _retrieve(self, url: str) -> FetchResult:
        filepath = self.snapshots_dir / snapshot_filename(url)
        if not filepath.exists():
            raise NetworkError(url, f'no snapshot at {filepath}', status_code=404)

        html = filepath.read_text(encoding='utf-8')
        self.logger.info(f'Loaded snapshot for {url} from {filepath.name}')
        return FetchResult(url=url, html=html, status_code=200, content_type='text/html')
