"""Pagination driver for listing pages.

Pages are fetched strictly one after another so the fetcher's politeness
delay always separates two requests.
"""

import logging
from collections.abc import Callable, Iterable
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

import logfire
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from newsgrid.config import ScrapeConfig
from newsgrid.core.content import ContentFetcher
from newsgrid.core.extraction import assemble_page
from newsgrid.core.fetcher import HTMLFetcher, create_fetcher, create_rate_limiter
from newsgrid.models.records import ArticleTable, PageRequest
from newsgrid.models.selectors import SiteSelectors
from newsgrid.utils.exceptions import NewsgridError

PAGE_PLACEHOLDER = '{page}'

PageCallback = Callable[[PageRequest, ArticleTable], None]


def build_page_url(template: str, page: int) -> str:
    """Build the URL of one listing page.

    Args:
        template: URL with a '{page}' placeholder, or a plain URL
        page: Page number

    Returns:
        The template with the placeholder replaced, or the plain URL with its
        'page' query parameter set to the page number

    """
    if PAGE_PLACEHOLDER in template:
        return template.replace(PAGE_PLACEHOLDER, str(page))

    parsed = urlparse(template)
    query = [(key, value) for key, value in parse_qsl(parsed.query, keep_blank_values=True) if key != 'page']
    query.append(('page', str(page)))
    return urlunparse(parsed._replace(query=urlencode(query)))


def page_requests(template: str, pages: Iterable[int]) -> list[PageRequest]:
    """Generate one PageRequest per page number, in the given order."""
    return [PageRequest(url=build_page_url(template, page), page_index=page) for page in pages]


class Pipeline:
    """Scrapes a range of listing pages into one ArticleTable.

    Attributes:
        config: Scrape configuration
        console: Rich console instance for formatted output
        fetcher: Fetcher shared by listing and article pages
        content: Content fetcher for article bodies
        failed_pages: Pages skipped during the last run when skip_failed is on
        logger: Logger instance for detailed run tracking

    """

    def __init__(self, config: ScrapeConfig, fetcher: HTMLFetcher | None = None, console: Console | None = None):
        """Initialize the pipeline.

        Args:
            config: Scrape configuration
            fetcher: Fetcher to use. Defaults to a SimpleFetcher throttled per config.
                     A fetcher passed in is not closed by the pipeline.
            console: Rich console instance. Defaults to a themed Console.

        """
        self.config = config
        self.console = console or Console(
            theme=Theme(
                {
                    'info': 'dim cyan',
                    'warning': 'magenta',
                    'danger': 'bold red',
                    'success': 'bold green',
                    'step': 'bold blue',
                }
            )
        )

        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or create_fetcher(
            'simple',
            rate_limiter=create_rate_limiter(config.rate_limit, config.delay),
            timeout=config.timeout,
        )
        self.content = ContentFetcher(self.fetcher, config.selectors, console=self.console)
        self.failed_pages: list[PageRequest] = []
        self.logger = logging.getLogger(__name__)

    def scrape_page(self, request: PageRequest) -> ArticleTable:
        """Fetch one listing page and assemble its articles.

        Args:
            request: Page to scrape

        Returns:
            One record per article on the page, in document order

        Raises:
            NetworkError: If the page could not be retrieved
            ParseError: If the page is not HTML
            DateParseError: If a datetime attribute is missing or malformed
            CardinalityMismatch: If the field columns differ in length

        """
        with logfire.span('scrape_page', url=request.url, page=request.page_index):
            self.console.print(f'[step]Page {request.page_index}: {request.url}[/step]')
            doc = self.fetcher.fetch(request.url)
            table = assemble_page(doc, self.config.selectors, self.config.link_base(doc.url or request.url))
            self.console.print(f'[success]  ✓ {len(table)} articles[/success]')
            self.logger.info(f'Page {request.page_index} ({request.url}): {len(table)} articles')
            return table

    def scrape_all(
        self,
        template: str | None = None,
        pages: Iterable[int] | None = None,
        skip_failed: bool | None = None,
        on_page: PageCallback | None = None,
    ) -> ArticleTable:
        """Scrape every page in order and concatenate the results.

        By default the first failing page aborts the run and nothing is returned.
        With skip_failed the page is logged, recorded in failed_pages and skipped.

        Args:
            template: Listing URL template. Defaults to config.template.
            pages: Page numbers to scrape. Defaults to config.pages.
            skip_failed: Skip failing pages instead of aborting. Defaults to config.skip_failed.
            on_page: Called with each page's request and table once the page succeeds,
                     e.g. to persist results incrementally

        Returns:
            All records, page by page in the given order

        Raises:
            NewsgridError: The first page failure, unless skip_failed is set

        """
        template = template or self.config.template
        pages = self.config.pages if pages is None else pages
        skip_failed = self.config.skip_failed if skip_failed is None else skip_failed

        planned = page_requests(template, pages)
        self.failed_pages = []
        tables: list[ArticleTable] = []

        with logfire.span('scrape_all', template=template, pages=len(planned), skip_failed=skip_failed):
            for request in planned:
                try:
                    table = self.scrape_page(request)
                except NewsgridError as e:
                    if not skip_failed:
                        self.console.print(f'[danger]✗ Page {request.page_index} failed: {e}[/danger]')
                        logfire.error('Page failed, aborting run', url=request.url, error=str(e))
                        raise
                    self.console.print(f'[warning]⚠ Skipping page {request.page_index}: {e}[/warning]')
                    logfire.warn('Page failed, skipping', url=request.url, error=str(e))
                    self.failed_pages.append(request)
                    continue

                tables.append(table)
                if on_page:
                    on_page(request, table)

            result = ArticleTable.concat(tables)
            logfire.info('Scrape finished', articles=len(result), failed_pages=len(self.failed_pages))
            return result

    def fetch_bodies(self, table: ArticleTable) -> ArticleTable:
        """Fill in the body text of every record."""
        with logfire.span('fetch_bodies', articles=len(table)):
            self.console.print(f'[step]Fetching {len(table)} article bodies...[/step]')
            return self.content.fill_bodies(table)

    def run(self, on_page: PageCallback | None = None) -> ArticleTable:
        """Scrape the configured pages and, if configured, the article bodies."""
        table = self.scrape_all(on_page=on_page)
        if self.config.fetch_bodies:
            table = self.fetch_bodies(table)
        return table

    def show_summary(self, table: ArticleTable, limit: int = 10) -> None:
        """Print a summary table of scraped articles.

        Args:
            table: Scraped articles
            limit: Maximum number of rows to show. Defaults to 10.

        """
        summary = Table(title=f'{len(table)} articles')
        summary.add_column('Headline', style='cyan')
        summary.add_column('Author', style='green')
        summary.add_column('Date', style='yellow')
        summary.add_column('Link', style='dim')

        for record in table[:limit]:
            summary.add_row(record.headline, record.author, record.date.isoformat(), record.link)

        self.console.print(summary)
        if len(table) > limit:
            self.console.print(f'[info]... and {len(table) - limit} more[/info]')
        if self.failed_pages:
            skipped = ', '.join(str(request.page_index) for request in self.failed_pages)
            self.console.print(f'[warning]Skipped pages: {skipped}[/warning]')

    def close(self) -> None:
        """Close the fetcher if the pipeline created it."""
        if self._owns_fetcher:
            self.fetcher.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def scrape_all(
    template: str,
    pages: Iterable[int] = range(1, 6),
    selectors: SiteSelectors | None = None,
    fetcher: HTMLFetcher | None = None,
    **config: object,
) -> ArticleTable:
    """Scrape listing pages with a one-off pipeline.

    Args:
        template: Listing URL template
        pages: Page numbers to scrape. Defaults to pages 1 to 5.
        selectors: Site selector profile. Defaults to SiteSelectors().
        fetcher: Fetcher to use. Defaults to a throttled SimpleFetcher.
        **config: Other ScrapeConfig fields (delay, base_url, skip_failed, ...)

    Returns:
        All records, page by page

    """
    scrape_config = ScrapeConfig(template=template, selectors=selectors or SiteSelectors(), **config)
    with Pipeline(scrape_config, fetcher=fetcher) as pipeline:
        return pipeline.scrape_all(pages=pages)
