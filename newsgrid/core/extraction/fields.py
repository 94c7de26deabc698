"""Field extractors for listing pages.

Each extractor returns one column with one entry per article, in document order.
"""

import logging
from datetime import datetime

from dateutil.parser import isoparse

from newsgrid.core.extraction.normalize import normalize
from newsgrid.core.selection import Document, ElementHandle, select
from newsgrid.models.selectors import SiteSelectors
from newsgrid.utils.exceptions import DateParseError, ExtractionError

AUTHOR_DELIMITER = ', '

logger = logging.getLogger(__name__)


def extract_headlines(doc: Document, selectors: SiteSelectors) -> list[str]:
    """Extract the headline text of every article."""
    return [handle.text for handle in select(doc, selectors.headline)]


def join_authors(byline: ElementHandle, author_selector: str = 'a') -> str:
    """Join the author links of one byline into a display string.

    Args:
        byline: Byline container of a single article
        author_selector: Selector for author links inside the container

    Returns:
        Author names in link order joined with ', ', or '' if there are none

    """
    names = [handle.text for handle in select(byline, author_selector)]
    return AUTHOR_DELIMITER.join(name for name in names if name)


def extract_authors(doc: Document, selectors: SiteSelectors) -> list[str]:
    """Extract one joined author string per article.

    Authors are grouped per byline container before joining. Selecting every
    author link on the page at once would yield one entry per author instead of
    one per article as soon as an article has several authors.

    Args:
        doc: Parsed listing page
        selectors: Site selector profile

    Returns:
        One author string per byline container, in document order

    """
    return [join_authors(byline, selectors.byline_author) for byline in select(doc, selectors.byline)]


def parse_datetime(value: str | None, position: int | None = None) -> datetime:
    """Parse a machine-readable datetime attribute value.

    Args:
        value: ISO-8601 string, or None if the attribute was absent
        position: Index of the element on the page, for error messages

    Returns:
        The parsed timestamp; timezone-aware when the value carries an offset

    Raises:
        DateParseError: If the value is missing or not valid ISO-8601

    """
    if value is None:
        raise DateParseError(None, 'datetime attribute is missing', position=position)

    try:
        return isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        raise DateParseError(value, str(e), position=position) from e


def extract_dates(doc: Document, selectors: SiteSelectors) -> list[datetime]:
    """Extract the publication timestamp of every article.

    Only the machine-readable attribute is read; the element's text and title
    are display forms and are ignored.

    Args:
        doc: Parsed listing page
        selectors: Site selector profile

    Returns:
        One timestamp per time-marker element, in document order

    Raises:
        DateParseError: On the first missing or malformed attribute

    """
    return [
        parse_datetime(handle.attr(selectors.date_attribute), position=position)
        for position, handle in enumerate(select(doc, selectors.date))
    ]


def extract_links(doc: Document, selectors: SiteSelectors, base: str) -> list[str]:
    """Extract the absolute URL of every article.

    Args:
        doc: Parsed listing page
        selectors: Site selector profile
        base: Origin that relative links are resolved against

    Returns:
        One absolute URL per link element, in document order

    Raises:
        ExtractionError: If a link element lacks the link attribute

    """
    links = []
    for position, handle in enumerate(select(doc, selectors.link)):
        href = handle.attr(selectors.link_attribute)
        if href is None:
            raise ExtractionError(
                f'Link element at position {position} has no {selectors.link_attribute!r} attribute'
                f' on {doc.url or "<string>"}'
            )
        links.append(normalize(href, base))

    logger.debug(f'Extracted {len(links)} links from {doc.url}')
    return links
