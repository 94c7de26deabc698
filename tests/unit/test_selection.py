import pytest

from newsgrid.core.selection import Document, attr, select, select_one, text
from newsgrid.utils.exceptions import ParseError, SelectorError


def test_select_returns_matches_in_document_order(listing_doc):
    headlines = [text(handle) for handle in select(listing_doc, 'article h2')]

    assert headlines == ['Rivers rise across Europe', 'Markets steady after rally', 'Partner report']


def test_select_without_matches_returns_empty_list(listing_doc):
    assert select(listing_doc, 'table.scores td') == []
    assert select_one(listing_doc, 'table.scores td') is None


def test_scoped_selection_is_subset_of_unscoped(listing_doc):
    everywhere = select(listing_doc, 'h2')
    container = select_one(listing_doc, '#stories')
    scoped = select(container, 'h2')

    assert len(scoped) <= len(everywhere)
    assert set(scoped) <= set(everywhere)
    # Navigation and sidebar headings sit outside the stories container
    assert len(everywhere) - len(scoped) == 2


def test_compound_and_descendant_selectors(listing_doc):
    assert len(select(listing_doc, 'article.story')) == 3
    assert len(select(listing_doc, 'main#stories h2.headline a')) == 3
    assert len(select(listing_doc, 'aside.most-read h2')) == 1


def test_nested_select_only_sees_descendants(listing_doc):
    first_byline = select(listing_doc, '.byline')[0]

    assert [text(link) for link in first_byline.select('a')] == ['Ana Ruiz', 'Ben Ode']


def test_text_is_whitespace_normalized():
    doc = Document.parse('<div><p>  Hello\n\t<b>bold</b>   world </p></div>')

    assert text(select_one(doc, 'p')) == 'Hello bold world'


def test_attr_missing_yields_none(listing_doc):
    time_el = select_one(listing_doc, 'time')

    assert attr(time_el, 'datetime') == '2024-03-01T10:00:00Z'
    assert attr(time_el, 'data-missing') is None


def test_attr_joins_multi_valued_attributes():
    doc = Document.parse('<div class="byline wide dark">x</div>')

    assert select_one(doc, 'div').attr('class') == 'byline wide dark'


def test_invalid_selector_raises_selector_error(listing_doc):
    with pytest.raises(SelectorError) as exc_info:
        select(listing_doc, 'article >> h2[')

    assert exc_info.value.selector == 'article >> h2['


@pytest.mark.parametrize('body', ['', '   \n ', '{"articles": []}'])
def test_parse_rejects_non_html(body):
    with pytest.raises(ParseError):
        Document.parse(body, url='https://example.com/api')


def test_document_keeps_url():
    doc = Document.parse('<p>hi</p>', url='https://example.com/')

    assert doc.url == 'https://example.com/'
    assert select(doc, 'p')[0].document is doc
