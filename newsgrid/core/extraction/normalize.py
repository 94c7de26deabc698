"""Resolves article links against the page they were found on."""

from urllib.parse import urljoin


def normalize(relative: str, base: str) -> str:
    """Resolve a link found on a page into an absolute URL.

    Uses standard URL resolution, so absolute links are returned unchanged,
    protocol-relative links take the base scheme, and '..', query strings and
    fragments are handled.

    Args:
        relative: Link as it appears in the page (e.g. '/europe/article-123')
        base: Page URL to resolve against (e.g. 'https://example.com/news/')

    Returns:
        The absolute URL

    """
    return urljoin(base, relative.strip())
