"""Markdown output formatter for scraped tables."""

import os
from datetime import datetime

from newsgrid.models.records import ArticleRecord, ArticleTable


def format_markdown(table: ArticleTable, source: str | None = None) -> str:
    """Format a scraped table as Markdown, one section per article.

    Args:
        table: Scraped articles
        source: Listing template or URL the table was scraped from

    Returns:
        Formatted markdown string.

    """
    lines = []

    lines.append('# Scraped articles')
    lines.append('')

    lines.append('---')
    if source:
        lines.append(f'**Source:** {source}')
    lines.append(f'**Articles:** {len(table)}')
    lines.append(f'**Exported:** {datetime.now().isoformat()}')
    lines.append('---')
    lines.append('')

    for record in table:
        lines.extend(_format_record(record))
        lines.append('')

    return '\n'.join(lines)


def save_markdown(filepath: str, table: ArticleTable, source: str | None = None):
    """Format and save a scraped table as a Markdown file.

    Args:
        filepath: Path to save the file
        table: Scraped articles
        source: Listing template or URL the table was scraped from

    """
    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    markdown_content = format_markdown(table, source)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(markdown_content)


def _format_record(record: ArticleRecord) -> list[str]:
    """Format one article as a markdown section.

    Args:
        record: Article to format

    Returns:
        List of markdown lines.

    """
    lines = [f'## [{record.headline}]({record.link})', '']
    if record.author:
        lines.append(f'**Author:** {record.author}')
    lines.append(f'**Published:** {record.date.isoformat()}')

    if record.text:
        lines.append('')
        lines.extend(record.text.split('\n'))

    return lines
