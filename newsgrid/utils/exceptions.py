"""Custom exceptions for newsgrid."""


class NewsgridError(Exception):
    """Base class for all newsgrid exceptions."""

    pass


class NetworkError(NewsgridError):
    """Raised when a page cannot be retrieved (transport failure or non-success status)."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        """Initialize network error.

        Args:
            url: URL that was being fetched
            reason: Description of the transport or HTTP failure
            status_code: HTTP status code received, or None if no response arrived

        """
        self.url = url
        self.reason = reason
        self.status_code = status_code
        status = f' (status={status_code})' if status_code is not None else ''
        super().__init__(f'Failed to fetch {url}{status}: {reason}')


class ParseError(NewsgridError):
    """Raised when a response body cannot be interpreted as HTML."""

    def __init__(self, url: str | None, reason: str):
        """Initialize parse error.

        Args:
            url: URL the body came from, if known
            reason: Why the body could not be parsed

        """
        self.url = url
        self.reason = reason
        super().__init__(f'Could not parse HTML from {url or "<string>"}: {reason}')


class DateParseError(NewsgridError):
    """Raised when a machine-readable datetime attribute is missing or malformed."""

    def __init__(self, value: str | None, reason: str, position: int | None = None):
        """Initialize date parse error.

        Args:
            value: The raw attribute value, or None if the attribute was absent
            reason: Why the value could not be parsed
            position: Index of the offending element within the page, if known

        """
        self.value = value
        self.reason = reason
        self.position = position
        where = f' at position {position}' if position is not None else ''
        super().__init__(f'Invalid publication date {value!r}{where}: {reason}')


class CardinalityMismatch(NewsgridError):
    """Raised when extracted field columns differ in length within one page."""

    def __init__(self, lengths: dict[str, int], url: str | None = None):
        """Initialize cardinality mismatch.

        Args:
            lengths: Number of extracted values per column
            url: Page the columns were extracted from, if known

        """
        self.lengths = lengths
        self.url = url
        counts = ', '.join(f'{name}={count}' for name, count in lengths.items())
        where = f' on {url}' if url else ''
        super().__init__(f'Extracted columns differ in length{where}: {counts}')


class SelectorError(NewsgridError):
    """Raised when a CSS selector cannot be compiled."""

    def __init__(self, selector: str, reason: str):
        """Initialize selector error.

        Args:
            selector: The CSS selector that was rejected
            reason: Message from the selector parser

        """
        self.selector = selector
        self.reason = reason
        super().__init__(f'Invalid CSS selector {selector!r}: {reason}')


class ExtractionError(NewsgridError):
    """Raised when a matched element lacks data a field requires."""

    pass


class ConfigError(NewsgridError):
    """Raised when scrape configuration is invalid or cannot be loaded."""

    pass
