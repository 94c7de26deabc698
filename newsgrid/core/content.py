"""Fetches the body text of individual articles."""

import logging

import logfire
from rich.console import Console

from newsgrid.core.fetcher import HTMLFetcher
from newsgrid.core.selection import Document, select
from newsgrid.models.records import ArticleTable
from newsgrid.models.selectors import SiteSelectors


class ContentFetcher:
    """Fetches article pages and joins their body paragraphs into one string.

    Attributes:
        fetcher: Fetcher used for article pages; its politeness delay applies to each
        selectors: Site selector profile providing the body selectors
        console: Rich console instance for formatted output

    """

    def __init__(self, fetcher: HTMLFetcher, selectors: SiteSelectors | None = None, console: Console | None = None):
        """Initialize the content fetcher.

        Args:
            fetcher: Fetcher used for article pages
            selectors: Site selector profile. Defaults to SiteSelectors().
            console: Rich console instance for formatted output. Defaults to None (creates new Console).

        """
        self.fetcher = fetcher
        self.selectors = selectors or SiteSelectors()
        self.console = console or Console()
        self.logger = logging.getLogger(__name__)

    def extract_body(self, doc: Document) -> str:
        """Join the text of body paragraphs and subheadings of a parsed article.

        Args:
            doc: Parsed article page

        Returns:
            Non-empty element texts in document order, separated by newlines

        """
        parts = []
        seen = set()
        for container in select(doc, self.selectors.body_container):
            # Nested containers match the same elements again
            for element in select(container, self.selectors.body_elements):
                if element in seen:
                    continue
                seen.add(element)
                if element.text:
                    parts.append(element.text)
        return '\n'.join(parts)

    def fetch_body(self, url: str) -> str:
        """Fetch one article and return its body text.

        Args:
            url: Absolute URL of the article

        Returns:
            Body text of the article at exactly that URL

        Raises:
            NetworkError: If the article could not be retrieved
            ParseError: If the article is not HTML

        """
        with logfire.span('fetch_body', url=url):
            doc = self.fetcher.fetch(url)
            body = self.extract_body(doc)
            self.logger.info(f'Extracted {len(body):,} characters of body text from {url}')
            return body

    def fill_bodies(self, table: ArticleTable) -> ArticleTable:
        """Fetch the body of every record in a table.

        Args:
            table: Table whose records should receive body text

        Returns:
            A new table, same order, with each record's text filled from its own link

        """
        filled = ArticleTable()
        for position, record in enumerate(table, start=1):
            self.console.print(f'  ↻ [{position}/{len(table)}] Fetching body: {record.link}')
            filled.append(record.with_body(self.fetch_body(record.link)))
        return filled
