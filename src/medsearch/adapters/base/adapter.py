"""Base collection source — Abstract interface for every indexed collection.

A source is responsible for:
  1. Enumerating its records in their natural order
  2. Projecting each record to the uniform ``SearchableRecord`` view
  3. Building the ``SearchResult`` for a matched record
  4. Building the UI route for a record id
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import ClassVar, Generic, TypeVar

from medsearch.core.text import first_paragraph
from medsearch.models.records import RecordKind
from medsearch.models.result import ResultMetadata, SearchResult
from medsearch.models.searchable import SearchableRecord

RecordT = TypeVar("RecordT")

UrlTemplate = Callable[[str], str]


class CollectionSource(ABC, Generic[RecordT]):
    """Abstract base class for collection sources.

    Subclasses implement:
      - to_searchable(): project a record for the scorer
      - describe(): fallback-aware, one-paragraph result description
      - metadata(): kind-specific result metadata

    Sources hold a reference to the caller's records and never mutate them.
    The caller owns freshness: replace the source (or its records) when the
    underlying collection changes.
    """

    kind: ClassVar[RecordKind]
    default_url_prefix: ClassVar[str]

    def __init__(self, records: Iterable[RecordT] = (), url_template: UrlTemplate | None = None) -> None:
        self._records = list(records)
        self._url_template = url_template

    def __len__(self) -> int:
        return len(self._records)

    def records(self) -> Iterator[RecordT]:
        """Iterate records in the collection's natural order."""
        return iter(self._records)

    def url_for(self, record_id: str) -> str:
        """Build the UI route for a record id."""
        if self._url_template is not None:
            return self._url_template(record_id)
        return f"{self.default_url_prefix}/{record_id}"

    @abstractmethod
    def to_searchable(self, record: RecordT) -> SearchableRecord:
        """Project a record to the uniform searchable view.

        Must not raise on missing optional fields.
        """

    @abstractmethod
    def describe(self, record: RecordT) -> str:
        """Return at most one paragraph of descriptive text for a result."""

    @abstractmethod
    def metadata(self, record: RecordT) -> ResultMetadata:
        """Return the kind-specific metadata for a result."""

    def image_url(self, record: RecordT) -> str | None:
        """Return the record's image, if the kind carries one."""
        return getattr(record, "image_url", None)

    def to_result(self, record: RecordT, score: float) -> SearchResult:
        """Build the search result for a matched record.

        Args:
            record: The matched domain record.
            score: Its relevance score (must be > 0).

        Returns:
            A SearchResult carrying the score and kind-specific fields.
        """
        view = self.to_searchable(record)
        return SearchResult(
            id=view.id,
            title=view.title,
            description=self.describe(record),
            kind=self.kind,
            url=self.url_for(view.id),
            image_url=self.image_url(record),
            metadata=self.metadata(record),
            relevance_score=score,
        )

    @staticmethod
    def _summary(text: str | None) -> str:
        return first_paragraph(text or "")
