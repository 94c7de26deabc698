"""Scrape configuration and environment loading."""

import json
import os
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from newsgrid.models.selectors import SiteSelectors
from newsgrid.utils.exceptions import ConfigError

ENV_PREFIX = 'NEWSGRID_'


class ScrapeConfig(BaseModel):
    """Everything a scrape run needs, passed explicitly to the pipeline.

    Attributes:
        template: Listing URL template with a '{page}' placeholder, or a plain URL
                  that gets a 'page' query parameter
        first_page: First page number to scrape (inclusive)
        last_page: Last page number to scrape (inclusive)
        delay: Politeness delay after each request in seconds
        rate_limit: 'fixed' sleeps the full delay after each request, 'interval'
                    keeps at least the delay between request starts
        timeout: Request timeout in seconds
        base_url: Fixed base for resolving relative links; by default each link is
                  resolved against the URL of the page it was found on
        selectors: Site selector profile
        skip_failed: Skip pages that fail instead of aborting the run
        fetch_bodies: Fetch each article's body text after the listing pages

    """

    template: str = Field(description='Listing URL template')
    first_page: int = Field(default=1, ge=0, description='First page (inclusive)')
    last_page: int = Field(default=5, ge=0, description='Last page (inclusive)')
    delay: float = Field(default=2.0, ge=0, description='Seconds to pause after each request')
    rate_limit: Literal['fixed', 'interval'] = Field(default='fixed', description='Throttling strategy')
    timeout: int = Field(default=30, gt=0, description='Request timeout in seconds')
    base_url: str | None = Field(default=None, description='Fixed base for resolving relative links')
    selectors: SiteSelectors = Field(default_factory=SiteSelectors, description='Site selector profile')
    skip_failed: bool = Field(default=False, description='Skip failing pages')
    fetch_bodies: bool = Field(default=False, description='Fetch article bodies')

    @field_validator('template')
    @classmethod
    def _check_template(cls, value: str) -> str:
        if not value.startswith(('http://', 'https://')):
            raise ValueError(f'template must be an http(s) URL, got {value!r}')
        return value

    @model_validator(mode='after')
    def _check_pages(self) -> 'ScrapeConfig':
        if self.last_page < self.first_page:
            raise ValueError(f'last_page ({self.last_page}) is before first_page ({self.first_page})')
        return self

    def link_base(self, page_url: str) -> str:
        """URL that relative article links found on `page_url` are resolved against."""
        return self.base_url or page_url

    @property
    def pages(self) -> range:
        """Page numbers to scrape, in order."""
        return range(self.first_page, self.last_page + 1)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None, **overrides: Any) -> 'ScrapeConfig':
        """Build a configuration from NEWSGRID_* environment variables.

        A .env file is loaded first when present. Keyword overrides that are not
        None take precedence over the environment.

        Args:
            env_file: Path to a .env file. Defaults to python-dotenv's lookup.
            **overrides: Field values that win over the environment

        Returns:
            The validated configuration

        Raises:
            ConfigError: If required values are missing or invalid

        """
        load_dotenv(env_file)

        values: dict[str, Any] = {}
        for name in ('template', 'first_page', 'last_page', 'delay', 'rate_limit', 'timeout', 'base_url'):
            env_value = os.getenv(f'{ENV_PREFIX}{name.upper()}')
            if env_value:
                values[name] = env_value

        selectors_file = os.getenv(f'{ENV_PREFIX}SELECTORS')
        if selectors_file:
            values['selectors'] = load_selectors_file(selectors_file)

        values.update({key: value for key, value in overrides.items() if value is not None})

        if 'template' not in values:
            raise ConfigError(f'No listing template given; set {ENV_PREFIX}TEMPLATE or pass --template')

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f'Invalid scrape configuration: {e}') from e


def load_selectors_file(path: str | Path) -> SiteSelectors:
    """Load a selector profile from a JSON file.

    Args:
        path: Path to a JSON object with SiteSelectors fields

    Returns:
        The selector profile

    Raises:
        ConfigError: If the file is missing, not JSON, or has invalid fields

    """
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f'Could not read selectors from {path}: {e}') from e

    # Files written by SelectorStorage wrap the profile with metadata
    if isinstance(data, dict) and isinstance(data.get('selectors'), dict):
        data = data['selectors']

    try:
        return SiteSelectors(**data)
    except (TypeError, ValidationError) as e:
        raise ConfigError(f'Invalid selectors in {path}: {e}') from e


def parse_page_range(text: str) -> tuple[int, int]:
    """Parse a page range such as '5' (pages 1 to 5) or '2-4'.

    Args:
        text: Page bound or inclusive range

    Returns:
        (first_page, last_page)

    Raises:
        ConfigError: If the text is not a valid range

    """
    try:
        if '-' in text:
            first, last = (int(part) for part in text.split('-', 1))
        else:
            first, last = 1, int(text)
    except ValueError as e:
        raise ConfigError(f'Invalid page range {text!r}; use N or A-B') from e

    if first < 0 or last < first:
        raise ConfigError(f'Invalid page range {text!r}; use N or A-B')

    return first, last
