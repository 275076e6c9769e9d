"""Archive source — Archived discussions and documents.

Archive entries are the only kind with tags in the stock catalogue; each
matching tag adds to the score.
"""

from __future__ import annotations

from medsearch.adapters.base.adapter import CollectionSource
from medsearch.models.records import ArchiveEntry, RecordKind
from medsearch.models.result import ResultMetadata
from medsearch.models.searchable import Popularity, SearchableRecord


class ArchiveSource(CollectionSource[ArchiveEntry]):
    """Collection source for ``ArchiveEntry`` records."""

    kind = RecordKind.ARCHIVE
    default_url_prefix = "/archive"

    def to_searchable(self, record: ArchiveEntry) -> SearchableRecord:
        return SearchableRecord(
            id=record.id,
            kind=self.kind,
            title=record.title,
            body=record.description or "",
            author=record.source or "",
            facet=record.category or "",
            tags=tuple(record.tags),
            popularity=Popularity(views=record.views),
        )

    def describe(self, record: ArchiveEntry) -> str:
        return self._summary(record.description)

    def metadata(self, record: ArchiveEntry) -> ResultMetadata:
        return ResultMetadata(
            category=record.category,
            tags=list(record.tags),
            created_at=record.created_at,
            views=record.views,
        )
