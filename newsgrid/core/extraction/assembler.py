"""Assembles extracted columns into one table per listing page."""

from newsgrid.core.extraction.fields import extract_authors, extract_dates, extract_headlines, extract_links
from newsgrid.core.selection import Document
from newsgrid.models.records import ArticleTable
from newsgrid.models.selectors import SiteSelectors


def assemble_page(doc: Document, selectors: SiteSelectors, base: str) -> ArticleTable:
    """Extract every field of a listing page and zip them into rows.

    Args:
        doc: Parsed listing page
        selectors: Site selector profile
        base: Origin that relative links are resolved against

    Returns:
        One record per article, in document order

    Raises:
        CardinalityMismatch: If the field columns differ in length
        DateParseError: If a datetime attribute is missing or malformed

    """
    return ArticleTable.from_columns(
        headlines=extract_headlines(doc, selectors),
        authors=extract_authors(doc, selectors),
        dates=extract_dates(doc, selectors),
        links=extract_links(doc, selectors, base),
        url=doc.url,
    )
