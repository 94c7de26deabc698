"""Result of a single page fetch."""

from dataclasses import dataclass


@dataclass
class FetchResult:
    """Result of an HTML fetch operation.

    Attributes:
        url: URL from which the HTML was fetched
        html: HTML content of the response
        status_code: HTTP status code of the response
        content_type: Value of the Content-Type header, if any
        fetch_time: Total time for the request, excluding the politeness delay

    """

    url: str
    html: str
    status_code: int = 200
    content_type: str | None = None
    fetch_time: float = 0.0

    @property
    def is_html(self) -> bool:
        """Whether the declared content type can hold HTML.

        Returns:
            True if no content type was declared or it names an HTML/XML type

        """
        if not self.content_type:
            return True
        media_type = self.content_type.split(';', 1)[0].strip().lower()
        return media_type in {'text/html', 'application/xhtml+xml', 'text/xml', 'application/xml', 'text/plain'}
