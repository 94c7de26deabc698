"""Article records and the append-only table they are collected in."""

from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime
from typing import Any, ClassVar, overload

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from newsgrid.utils.exceptions import CardinalityMismatch


class PageRequest(BaseModel):
    """One listing page to scrape.

    Attributes:
        url: Absolute URL of the listing page
        page_index: Page number the URL was generated for

    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(description='Listing page URL')
    page_index: int = Field(description='Page number')


class ArticleRecord(BaseModel):
    """One article detected on a listing page.

    Attributes:
        headline: Article headline text
        author: Authors of the article joined as one display string
        date: Publication timestamp read from the machine-readable datetime attribute
        link: Absolute URL of the article
        text: Article body, filled later by the content fetcher

    """

    model_config = ConfigDict(frozen=True)

    headline: str = Field(description='Headline text')
    author: str = Field(description="Authors joined with ', '")
    date: datetime = Field(description='Publication timestamp')
    link: str = Field(description='Absolute article URL')
    text: str | None = Field(default=None, description='Article body text')

    def with_body(self, text: str) -> 'ArticleRecord':
        """Return a copy of this record with the body text set."""
        return self.model_copy(update={'text': text})


class ArticleTable:
    """Ordered, append-only sequence of ArticleRecord.

    Records keep insertion order and are never deduplicated, updated or removed.

    Attributes:
        COLUMNS: Column names in export order

    """

    COLUMNS: ClassVar[tuple[str, ...]] = ('headline', 'author', 'date', 'link', 'text')

    def __init__(self, records: Iterable[ArticleRecord] = ()):
        """Initialize the table.

        Args:
            records: Initial records, in order. Defaults to empty.

        """
        self._records: list[ArticleRecord] = list(records)

    @classmethod
    def from_columns(
        cls,
        headlines: Sequence[str],
        authors: Sequence[str],
        dates: Sequence[datetime],
        links: Sequence[str],
        url: str | None = None,
    ) -> 'ArticleTable':
        """Zip extracted field columns into one row per article.

        Args:
            headlines: Headline per article
            authors: Joined author string per article
            dates: Publication timestamp per article
            links: Absolute link per article
            url: Page the columns came from, used in error messages

        Returns:
            A table with one record per article, in column order.

        Raises:
            CardinalityMismatch: If the columns are not all the same length

        """
        lengths = {
            'headline': len(headlines),
            'author': len(authors),
            'date': len(dates),
            'link': len(links),
        }
        if len(set(lengths.values())) > 1:
            raise CardinalityMismatch(lengths, url=url)

        return cls(
            ArticleRecord(headline=headline, author=author, date=date, link=link)
            for headline, author, date, link in zip(headlines, authors, dates, links, strict=True)
        )

    @classmethod
    def concat(cls, tables: Iterable['ArticleTable']) -> 'ArticleTable':
        """Concatenate tables in the given order."""
        combined = cls()
        for table in tables:
            combined.extend(table)
        return combined

    def append(self, record: ArticleRecord) -> None:
        """Append one record to the end of the table."""
        self._records.append(record)

    def extend(self, records: Iterable[ArticleRecord]) -> None:
        """Append records to the end of the table, keeping their order."""
        self._records.extend(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ArticleRecord]:
        return iter(self._records)

    @overload
    def __getitem__(self, index: int) -> ArticleRecord: ...

    @overload
    def __getitem__(self, index: slice) -> list[ArticleRecord]: ...

    def __getitem__(self, index: int | slice) -> ArticleRecord | list[ArticleRecord]:
        return self._records[index]

    def __repr__(self) -> str:
        return f'ArticleTable({len(self._records)} records)'

    def to_rows(self) -> list[dict[str, Any]]:
        """Return the table as a list of dicts keyed by column name."""
        return [record.model_dump() for record in self._records]

    def to_dataframe(self) -> pd.DataFrame:
        """Return the table as a pandas DataFrame with the standard columns."""
        return pd.DataFrame(self.to_rows(), columns=list(self.COLUMNS))
