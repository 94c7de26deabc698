"""Builds the request headers sent with every page fetch."""

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


class HeaderGenerator:
    """Generates plain browser-like headers.

    Headers never carry cookies or credentials; every request is an anonymous GET.
    """

    @staticmethod
    def generate_headers(user_agent: str | None = None) -> dict[str, str]:
        """Generate the headers for one request.

        Args:
            user_agent: User agent to announce. Defaults to DEFAULT_USER_AGENT.

        Returns:
            The headers to be used to fetch an HTML page

        """
        headers = {
            'User-Agent': user_agent or DEFAULT_USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
            'Accept-Encoding': 'gzip, deflate',
            'Connection': 'keep-alive',
        }

        return headers
