"""Dispatches table exports to the format-specific writers."""

from newsgrid.models.records import ArticleTable
from newsgrid.outputs.csv_output import save_csv
from newsgrid.outputs.json_output import save_json
from newsgrid.outputs.markdown_output import save_markdown

OUTPUT_FORMATS = ('csv', 'json', 'markdown')


def infer_format(filepath: str, default: str = 'csv') -> str:
    """Guess the output format from a file extension."""
    lowered = filepath.lower()
    if lowered.endswith('.json'):
        return 'json'
    if lowered.endswith(('.md', '.markdown')):
        return 'markdown'
    if lowered.endswith('.csv'):
        return 'csv'
    return default


def save_table(filepath: str, table: ArticleTable, output_format: str | None = None, source: str | None = None) -> str:
    """Save a scraped table to file.

    Args:
        filepath: Path to save the file
        table: Scraped articles
        output_format: 'csv', 'json' or 'markdown'. Defaults to the format implied by the extension.
        source: Listing template or URL, recorded in JSON and Markdown output

    Returns:
        Path to the saved file.

    """
    output_format = output_format or infer_format(filepath)

    if output_format == 'json':
        save_json(filepath, table, source)
    elif output_format == 'markdown':
        save_markdown(filepath, table, source)
    elif output_format == 'csv':
        save_csv(filepath, table)
    else:
        raise ValueError(f'Unknown output format: {output_format}. Choose from: {list(OUTPUT_FORMATS)}')

    return filepath
