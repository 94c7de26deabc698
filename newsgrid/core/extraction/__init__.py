"""Field extraction, link normalization and page assembly."""

from newsgrid.core.extraction.assembler import assemble_page
from newsgrid.core.extraction.fields import (
    AUTHOR_DELIMITER,
    extract_authors,
    extract_dates,
    extract_headlines,
    extract_links,
    join_authors,
    parse_datetime,
)
from newsgrid.core.extraction.normalize import normalize

__all__ = [
    'AUTHOR_DELIMITER',
    'assemble_page',
    'extract_authors',
    'extract_dates',
    'extract_headlines',
    'extract_links',
    'join_authors',
    'normalize',
    'parse_datetime',
]
