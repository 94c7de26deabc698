"""Fetcher factory and exports."""

from newsgrid.core.fetcher.base import HTMLFetcher, snapshot_filename
from newsgrid.core.fetcher.simple import SimpleFetcher
from newsgrid.core.fetcher.snapshot import SnapshotFetcher
from newsgrid.core.fetcher.throttle import FixedDelay, MinimumInterval, RateLimiter, create_rate_limiter


def create_fetcher(fetcher_type: str = 'simple', **kwargs) -> HTMLFetcher:
    """Create an HTML fetcher.

    Args:
        fetcher_type: Type of fetcher ('simple' or 'snapshot')
        **kwargs: Additional arguments for the fetcher

    Returns:
        HTMLFetcher instance

    """
    fetchers: dict[str, type[HTMLFetcher]] = {
        'simple': SimpleFetcher,
        'snapshot': SnapshotFetcher,
    }

    if fetcher_type not in fetchers:
        raise ValueError(f'Unknown fetcher type: {fetcher_type}. Choose from: {list(fetchers.keys())}')

    return fetchers[fetcher_type](**kwargs)


__all__ = [
    'FixedDelay',
    'HTMLFetcher',
    'MinimumInterval',
    'RateLimiter',
    'SimpleFetcher',
    'SnapshotFetcher',
    'create_fetcher',
    'create_rate_limiter',
    'snapshot_filename',
]
