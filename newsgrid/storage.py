"""Handles saving and loading site selector profiles to/from JSON files."""

import json
import logging
import os
from urllib.parse import urlparse

from newsgrid.config import load_selectors_file
from newsgrid.models.selectors import SiteSelectors
from newsgrid.outputs.json_output import save_selectors_json
from newsgrid.utils.exceptions import ConfigError
from newsgrid.utils.files import init_newsgrid


class SelectorStorage:
    """Manages selector profiles stored as one JSON file per domain.

    Attributes:
        storage_dir: Directory path where selector files are stored

    """

    def __init__(self, storage_dir: str | None = None):
        """Initialize the storage manager.

        Args:
            storage_dir: Directory for selector files. Defaults to .newsgrid/selectors in the project root.

        """
        self.storage_dir = storage_dir or str(init_newsgrid('selectors'))
        self.logger = logging.getLogger(__name__)

    def save_selectors(self, url: str, selectors: SiteSelectors) -> str:
        """Save a selector profile for the domain of a URL.

        Args:
            url: Any URL on the site the profile applies to
            selectors: Selector profile

        Returns:
            Path to the saved file.

        """
        domain = self._extract_domain(url)
        filepath = self._get_filepath(domain)

        save_selectors_json(filepath, url, domain, selectors.model_dump())

        self.logger.info(f'Saved selectors for {domain} to {filepath}')
        return filepath

    def load_selectors(self, domain: str) -> SiteSelectors | None:
        """Load the selector profile of a domain.

        Args:
            domain: Domain name (e.g., 'example.com') or a URL on it

        Returns:
            The selector profile, or None if none is stored.

        Raises:
            ConfigError: If the stored file is unreadable or invalid

        """
        filepath = self._get_filepath(self._extract_domain(domain))

        if not os.path.exists(filepath):
            return None

        return load_selectors_file(filepath)

    def selector_exists(self, domain: str) -> bool:
        """Check if a selector profile exists for a domain."""
        return os.path.exists(self._get_filepath(self._extract_domain(domain)))

    def list_domains(self) -> list[str]:
        """List domains that have a stored selector profile.

        Domains are read from the saved files, since file names do not keep
        dots and ports apart.

        Raises:
            ConfigError: If a stored file is unreadable

        """
        if not os.path.exists(self.storage_dir):
            return []

        domains = []
        for filename in os.listdir(self.storage_dir):
            if filename.startswith('selectors_') and filename.endswith('.json'):
                data = self._load_file_data(os.path.join(self.storage_dir, filename))
                domains.append(data.get('domain') or filename[len('selectors_') : -len('.json')])
        return sorted(domains)

    def _load_file_data(self, filepath: str) -> dict:
        """Read the raw JSON content of a stored selector file."""
        try:
            with open(filepath, encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f'Could not read selectors from {filepath}: {e}') from e
        return data if isinstance(data, dict) else {}

    def _extract_domain(self, url: str) -> str:
        """Extract the domain from a URL, or return a bare domain as-is."""
        netloc = urlparse(url).netloc if '://' in url else url
        return netloc.replace('www.', '')

    def _get_filepath(self, domain: str) -> str:
        """Get the selector file path for a domain."""
        safe_domain = domain.replace('.', '_').replace(':', '_')
        return os.path.join(self.storage_dir, f'selectors_{safe_domain}.json')
