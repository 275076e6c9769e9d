"""Article source — Scientific articles from the library.

Field mapping:
  body   ← summary, falling back to abstract
  author ← author, falling back to the full author list
  facet  ← specialty
"""

from __future__ import annotations

from medsearch.adapters.base.adapter import CollectionSource
from medsearch.models.records import Article, RecordKind
from medsearch.models.result import ResultMetadata
from medsearch.models.searchable import Popularity, SearchableRecord


class ArticleSource(CollectionSource[Article]):
    """Collection source for ``Article`` records."""

    kind = RecordKind.ARTICLE
    default_url_prefix = "/library"

    def to_searchable(self, record: Article) -> SearchableRecord:
        return SearchableRecord(
            id=record.id,
            kind=self.kind,
            title=record.title,
            body=record.summary or record.abstract or "",
            author=record.author or record.authors or "",
            facet=record.specialty or "",
            tags=tuple(record.tags),
            popularity=Popularity(views=record.views, rating=record.rating),
        )

    def describe(self, record: Article) -> str:
        return self._summary(record.summary or record.abstract)

    def metadata(self, record: Article) -> ResultMetadata:
        published = record.published_at or (str(record.year) if record.year else None)
        return ResultMetadata(
            author=record.author or record.authors,
            specialty=record.specialty,
            tags=list(record.tags) or None,
            created_at=published,
            views=record.views,
        )
