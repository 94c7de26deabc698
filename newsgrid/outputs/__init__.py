"""Output formatting for scraped tables."""

from newsgrid.outputs.utils import OUTPUT_FORMATS, infer_format, save_table

__all__ = ['OUTPUT_FORMATS', 'infer_format', 'save_table']
