"""Data models for newsgrid."""

from newsgrid.models.records import ArticleRecord, ArticleTable, PageRequest
from newsgrid.models.results import FetchResult
from newsgrid.models.selectors import SiteSelectors

__all__ = [
    'ArticleRecord',
    'ArticleTable',
    'FetchResult',
    'PageRequest',
    'SiteSelectors',
]
