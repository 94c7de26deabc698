"""CSS selection over parsed HTML documents."""

import re

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from newsgrid.utils.exceptions import ParseError, SelectorError

_MARKUP_PATTERN = re.compile(r'<\s*[a-zA-Z!?/]')


class Document:
    """A parsed HTML page.

    Attributes:
        url: URL the page was fetched from, or None for inline HTML
        soup: BeautifulSoup tree of the page

    """

    def __init__(self, soup: BeautifulSoup, url: str | None = None):
        """Wrap an already parsed tree.

        Args:
            soup: BeautifulSoup parsed HTML
            url: URL the page was fetched from

        """
        self.soup = soup
        self.url = url

    @classmethod
    def parse(cls, html: str, url: str | None = None) -> 'Document':
        """Parse HTML into a Document.

        Args:
            html: Raw HTML text
            url: URL the HTML came from

        Returns:
            The parsed Document

        Raises:
            ParseError: If the text is empty, holds no markup, or cannot be parsed

        """
        if not html or not html.strip():
            raise ParseError(url, 'empty document')

        if not _MARKUP_PATTERN.search(html):
            raise ParseError(url, 'no HTML markup found')

        try:
            soup = BeautifulSoup(html, 'lxml')
        except Exception as e:
            raise ParseError(url, str(e)) from e

        return cls(soup, url=url)

    def select(self, selector: str) -> list['ElementHandle']:
        """Select matching elements anywhere in the document."""
        return select(self, selector)

    def __repr__(self) -> str:
        return f'Document(url={self.url!r})'


class ElementHandle:
    """A reference to one matched element of a Document.

    Attributes:
        tag: The underlying BeautifulSoup tag
        document: The Document the element belongs to

    """

    def __init__(self, tag: Tag, document: Document):
        self.tag = tag
        self.document = document

    @property
    def text(self) -> str:
        """Concatenated text of the element and its descendants, whitespace-normalized."""
        return ' '.join(self.tag.get_text().split())

    def attr(self, name: str) -> str | None:
        """Look up an attribute by name.

        Args:
            name: Attribute name

        Returns:
            The attribute value, or None if the element has no such attribute.
            Multi-valued attributes such as class are joined with spaces.

        """
        value = self.tag.get(name)
        if value is None:
            return None
        # BeautifulSoup returns a list for multi-valued attributes
        if isinstance(value, list):
            return ' '.join(value)
        return value

    def select(self, selector: str) -> list['ElementHandle']:
        """Select matching descendants of this element."""
        return select(self, selector)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementHandle):
            return NotImplemented
        return self.tag is other.tag

    def __hash__(self) -> int:
        return id(self.tag)

    def __repr__(self) -> str:
        return f'ElementHandle(<{self.tag.name}>)'


def select(scope: Document | ElementHandle, selector: str) -> list[ElementHandle]:
    """Select elements matching a CSS selector, in document order.

    Selecting from an ElementHandle only considers that element's descendants,
    which lets callers narrow a broad selector to one container.

    Args:
        scope: Document or element to search within
        selector: CSS selector

    Returns:
        Matching elements in document order; empty if nothing matches.

    Raises:
        SelectorError: If the selector is not valid CSS

    """
    if isinstance(scope, Document):
        root: Tag = scope.soup
        document = scope
    else:
        root = scope.tag
        document = scope.document

    try:
        tags = root.select(selector)
    except SelectorSyntaxError as e:
        raise SelectorError(selector, str(e)) from e

    return [ElementHandle(tag, document) for tag in tags]


def select_one(scope: Document | ElementHandle, selector: str) -> ElementHandle | None:
    """Return the first element matching a CSS selector, or None."""
    matches = select(scope, selector)
    return matches[0] if matches else None


def text(handle: ElementHandle) -> str:
    """Return the whitespace-normalized text of an element."""
    return handle.text


def attr(handle: ElementHandle, name: str) -> str | None:
    """Return an attribute of an element, or None if it is absent."""
    return handle.attr(name)
