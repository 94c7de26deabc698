import pytest

from newsgrid.core.fetcher import FixedDelay, HTMLFetcher
from newsgrid.core.selection import Document
from newsgrid.models import FetchResult, SiteSelectors
from newsgrid.utils.exceptions import NetworkError


class StubFetcher(HTMLFetcher):
    """Serves canned pages by URL and records every request."""

    def __init__(self, pages: dict[str, str], rate_limiter=None):
        super().__init__(rate_limiter or FixedDelay(0))
        self.pages = pages
        self.requested: list[str] = []

    def _retrieve(self, url: str) -> FetchResult:
        self.requested.append(url)
        if url not in self.pages:
            raise NetworkError(url, 'HTTP 404 Not Found', status_code=404)
        return FetchResult(url=url, html=self.pages[url], content_type='text/html')


def make_article(slug: str, headline: str, authors: list[str], published: str) -> str:
    author_links = ' and '.join(f'<a href="/authors/{i}">{name}</a>' for i, name in enumerate(authors))
    return f"""
    <article class="story">
        <h2 class="headline"><a href="{slug}">{headline}</a></h2>
        <div class="byline">By {author_links}</div>
        <time datetime="{published}" title="human readable">yesterday</time>
    </article>
    """


def make_listing(prefix: str, count: int) -> str:
    articles = ''.join(
        make_article(f'/{prefix}/article-{i}', f'{prefix} story {i}', [f'Writer {i}'], f'2024-03-0{i + 1}T10:00:00Z')
        for i in range(count)
    )
    return f'<html><body><main>{articles}</main></body></html>'


@pytest.fixture
def listing_html():
    stories = ''.join(
        [
            make_article(
                '/europe/article-123', 'Rivers rise across Europe', ['Ana Ruiz', 'Ben Ode'], '2024-03-01T10:00:00Z'
            ),
            make_article(
                '/world/article-456', 'Markets   steady\n after rally', ['Chen Li'], '2024-02-28T08:30:00+01:00'
            ),
            make_article('https://other.example.org/full-story', 'Partner report', ['Dee Moss'], '2024-02-27'),
        ]
    )
    return f"""
    <!DOCTYPE html>
    <html>
    <head><title>News</title></head>
    <body>
        <header><h2>Site navigation</h2></header>
        <main id="stories">{stories}</main>
        <aside class="most-read"><h2>Most read</h2></aside>
    </body>
    </html>
    """


@pytest.fixture
def listing_doc(listing_html):
    return Document.parse(listing_html, url='https://example.com/news?page=1')


@pytest.fixture
def article_html():
    return """
    <html>
    <body>
        <nav><p>Subscribe now</p></nav>
        <article>
            <h1>Rivers rise across Europe</h1>
            <p>Heavy rain caused flooding.</p>
            <h2>Response</h2>
            <p>  Crews were   deployed. </p>
            <p></p>
        </article>
        <footer><p>Copyright</p></footer>
    </body>
    </html>
    """


@pytest.fixture
def selectors():
    return SiteSelectors()


@pytest.fixture
def stub_fetcher_factory():
    return StubFetcher


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""
    for item in items:
        file_path = str(item.fspath)

        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def listing_factory():
    return make_listing


@pytest.fixture
def article_factory():
    return make_article


@pytest.fixture(autouse=True)
def clean_newsgrid_env(monkeypatch):
    # Variables loaded from .env files bypass monkeypatch, so register each one for removal
    for name in ('TEMPLATE', 'FIRST_PAGE', 'LAST_PAGE', 'DELAY', 'RATE_LIMIT', 'TIMEOUT', 'BASE_URL', 'SELECTORS'):
        monkeypatch.setenv(f'NEWSGRID_{name}', '')
        monkeypatch.delenv(f'NEWSGRID_{name}')
