import pytest

from newsgrid.core.extraction import normalize


def test_relative_path_is_prefixed_with_origin():
    assert normalize('/europe/article-123', 'https://example.com') == 'https://example.com/europe/article-123'


def test_absolute_link_is_unchanged():
    link = 'https://other.example.org/story?id=7#top'

    assert normalize(link, 'https://example.com') == link


def test_normalization_is_idempotent():
    once = normalize('/europe/article-123', 'https://example.com')

    assert normalize(once, 'https://example.com') == once


@pytest.mark.parametrize(
    ('relative', 'base', 'expected'),
    [
        ('//cdn.example.net/a.html', 'https://example.com', 'https://cdn.example.net/a.html'),
        ('../world/b', 'https://example.com/news/europe/', 'https://example.com/news/world/b'),
        ('c?page=2#comments', 'https://example.com/news/', 'https://example.com/news/c?page=2#comments'),
        ('  /padded  ', 'https://example.com', 'https://example.com/padded'),
    ],
)
def test_standard_url_resolution(relative, base, expected):
    assert normalize(relative, base) == expected
