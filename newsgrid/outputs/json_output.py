"""JSON output formatter for scraped tables and selector profiles."""

import json
import os
from datetime import datetime

from newsgrid.models.records import ArticleTable


def format_json(table: ArticleTable, source: str | None = None) -> dict:
    """Format a scraped table as JSON with metadata.

    Args:
        table: Scraped articles
        source: Listing template or URL the table was scraped from

    Returns:
        Dictionary with metadata and articles, ready for JSON serialization.

    """
    return {
        'source': source,
        'exported_at': datetime.now().isoformat(),
        'count': len(table),
        'articles': [record.model_dump(mode='json') for record in table],
    }


def save_json(filepath: str, table: ArticleTable, source: str | None = None):
    """Format and save a scraped table as a JSON file.

    Args:
        filepath: Path to save the file
        table: Scraped articles
        source: Listing template or URL the table was scraped from

    """
    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    data = format_json(table, source)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def format_selectors_json(url: str, domain: str, selectors: dict) -> dict:
    """Format a selector profile as JSON with metadata.

    Args:
        url: URL the profile was written for
        domain: Domain name
        selectors: Selector profile (field -> selector)

    Returns:
        Dictionary with metadata and selectors, ready for JSON serialization.

    """
    return {
        'url': url,
        'domain': domain,
        'saved_at': datetime.now().isoformat(),
        'selectors': selectors,
    }


def save_selectors_json(filepath: str, url: str, domain: str, selectors: dict):
    """Format and save a selector profile as a JSON file.

    Args:
        filepath: Path to save the file
        url: URL the profile was written for
        domain: Domain name
        selectors: Selector profile (field -> selector)

    """
    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    data = format_selectors_json(url, domain, selectors)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
