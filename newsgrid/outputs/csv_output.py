"""CSV output via pandas."""

import os

from newsgrid.models.records import ArticleTable


def save_csv(filepath: str, table: ArticleTable):
    """Save a scraped table as CSV with the standard columns.

    Dates are written in ISO-8601; a missing body is written as an empty cell.

    Args:
        filepath: Path to save the file
        table: Scraped articles

    """
    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    df = table.to_dataframe()
    df['date'] = [record.date.isoformat() for record in table]
    df.to_csv(filepath, index=False)
