"""newsgrid - paginated news listings to tables with CSS selectors.

Fetch, select, extract, normalize, paginate, assemble.
"""

from newsgrid.config import ScrapeConfig, load_selectors_file
from newsgrid.core.content import ContentFetcher
from newsgrid.core.extraction import (
    assemble_page,
    extract_authors,
    extract_dates,
    extract_headlines,
    extract_links,
    normalize,
)
from newsgrid.core.fetcher import (
    FixedDelay,
    HTMLFetcher,
    MinimumInterval,
    RateLimiter,
    SimpleFetcher,
    SnapshotFetcher,
    create_fetcher,
)
from newsgrid.core.pipeline import Pipeline, page_requests, scrape_all
from newsgrid.core.selection import Document, ElementHandle, attr, select, select_one, text
from newsgrid.models import ArticleRecord, ArticleTable, FetchResult, PageRequest, SiteSelectors
from newsgrid.outputs import save_table
from newsgrid.storage import SelectorStorage
from newsgrid.utils.exceptions import (
    CardinalityMismatch,
    ConfigError,
    DateParseError,
    ExtractionError,
    NetworkError,
    NewsgridError,
    ParseError,
    SelectorError,
)

__all__ = [
    # Pipeline
    'Pipeline',
    'ScrapeConfig',
    'ContentFetcher',
    'page_requests',
    'scrape_all',
    # Fetchers
    'FixedDelay',
    'HTMLFetcher',
    'MinimumInterval',
    'RateLimiter',
    'SimpleFetcher',
    'SnapshotFetcher',
    'create_fetcher',
    # Selection and extraction
    'Document',
    'ElementHandle',
    'attr',
    'select',
    'select_one',
    'text',
    'assemble_page',
    'extract_authors',
    'extract_dates',
    'extract_headlines',
    'extract_links',
    'normalize',
    # Models
    'ArticleRecord',
    'ArticleTable',
    'FetchResult',
    'PageRequest',
    'SiteSelectors',
    # Storage and outputs
    'SelectorStorage',
    'load_selectors_file',
    'save_table',
    # Errors
    'CardinalityMismatch',
    'ConfigError',
    'DateParseError',
    'ExtractionError',
    'NetworkError',
    'NewsgridError',
    'ParseError',
    'SelectorError',
]
