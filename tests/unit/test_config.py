import json

import pytest

from newsgrid.config import ScrapeConfig, load_selectors_file, parse_page_range
from newsgrid.models import SiteSelectors
from newsgrid.utils.exceptions import ConfigError


def test_defaults_follow_reference_run():
    config = ScrapeConfig(template='https://example.com/news?page={page}')

    assert list(config.pages) == [1, 2, 3, 4, 5]
    assert config.delay == 2.0
    assert config.rate_limit == 'fixed'
    assert config.selectors == SiteSelectors()


def test_links_resolve_against_page_by_default():
    config = ScrapeConfig(template='https://example.com/news?page={page}')

    assert config.link_base('https://example.com/news/europe/?page=2') == 'https://example.com/news/europe/?page=2'


def test_base_url_overrides_page_url():
    config = ScrapeConfig(template='https://example.com/news', base_url='https://www.example.com')

    assert config.link_base('https://example.com/news?page=1') == 'https://www.example.com'


@pytest.mark.parametrize(
    'kwargs',
    [
        {'template': 'ftp://example.com/news'},
        {'template': 'https://example.com/news', 'first_page': 4, 'last_page': 2},
        {'template': 'https://example.com/news', 'delay': -1},
        {'template': 'https://example.com/news', 'rate_limit': 'adaptive'},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        ScrapeConfig(**kwargs)


def test_from_env_reads_prefixed_variables(monkeypatch):
    monkeypatch.setenv('NEWSGRID_TEMPLATE', 'https://example.com/news?page={page}')
    monkeypatch.setenv('NEWSGRID_LAST_PAGE', '3')
    monkeypatch.setenv('NEWSGRID_DELAY', '0.5')

    config = ScrapeConfig.from_env()

    assert list(config.pages) == [1, 2, 3]
    assert config.delay == 0.5


def test_from_env_overrides_win(monkeypatch):
    monkeypatch.setenv('NEWSGRID_TEMPLATE', 'https://example.com/news')
    monkeypatch.setenv('NEWSGRID_DELAY', '5')

    config = ScrapeConfig.from_env(delay=1.0, template=None)

    assert config.delay == 1.0
    assert config.template == 'https://example.com/news'


def test_from_env_reads_dotenv_file(tmp_path):
    env_file = tmp_path / 'custom.env'
    env_file.write_text('NEWSGRID_TEMPLATE=https://example.org/latest\nNEWSGRID_FIRST_PAGE=2\nNEWSGRID_LAST_PAGE=4\n')

    config = ScrapeConfig.from_env(env_file)

    assert config.template == 'https://example.org/latest'
    assert list(config.pages) == [2, 3, 4]


def test_from_env_without_template_raises():
    with pytest.raises(ConfigError):
        ScrapeConfig.from_env()


def test_from_env_wraps_validation_errors(monkeypatch):
    monkeypatch.setenv('NEWSGRID_TEMPLATE', 'https://example.com/news')
    monkeypatch.setenv('NEWSGRID_DELAY', 'slow')

    with pytest.raises(ConfigError):
        ScrapeConfig.from_env()


def test_from_env_loads_selectors_file(monkeypatch, tmp_path):
    selectors_file = tmp_path / 'site.json'
    selectors_file.write_text(json.dumps({'headline': 'h3.title', 'link': 'h3.title a'}))
    monkeypatch.setenv('NEWSGRID_TEMPLATE', 'https://example.com/news')
    monkeypatch.setenv('NEWSGRID_SELECTORS', str(selectors_file))

    config = ScrapeConfig.from_env()

    assert config.selectors.headline == 'h3.title'
    assert config.selectors.byline == '.byline'


def test_load_selectors_file_accepts_stored_profiles(tmp_path):
    selectors_file = tmp_path / 'selectors_example_com.json'
    selectors_file.write_text(json.dumps({'url': 'https://example.com', 'selectors': {'byline': '.credits'}}))

    assert load_selectors_file(selectors_file).byline == '.credits'


@pytest.mark.parametrize('content', ['not json', '{"headline": 5}', '[1, 2]'])
def test_load_selectors_file_rejects_bad_files(tmp_path, content):
    selectors_file = tmp_path / 'bad.json'
    selectors_file.write_text(content)

    with pytest.raises(ConfigError):
        load_selectors_file(selectors_file)


def test_load_selectors_file_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_selectors_file(tmp_path / 'nope.json')


@pytest.mark.parametrize(('text', 'expected'), [('5', (1, 5)), ('2-4', (2, 4)), ('3-3', (3, 3))])
def test_parse_page_range(text, expected):
    assert parse_page_range(text) == expected


@pytest.mark.parametrize('text', ['', 'five', '4-2', '1-x'])
def test_parse_page_range_rejects_invalid(text):
    with pytest.raises(ConfigError):
        parse_page_range(text)
