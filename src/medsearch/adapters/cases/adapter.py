"""Case source — Clinical cases submitted by members.

Field mapping:
  body   ← analysis
  author ← submitted_by
  facet  ← specialty
"""

from __future__ import annotations

from medsearch.adapters.base.adapter import CollectionSource
from medsearch.models.records import MedicalCase, RecordKind
from medsearch.models.result import ResultMetadata
from medsearch.models.searchable import Popularity, SearchableRecord


class CaseSource(CollectionSource[MedicalCase]):
    """Collection source for ``MedicalCase`` records."""

    kind = RecordKind.CASE
    default_url_prefix = "/cases"

    def to_searchable(self, record: MedicalCase) -> SearchableRecord:
        return SearchableRecord(
            id=record.id,
            kind=self.kind,
            title=record.title,
            body=record.analysis or "",
            author=record.submitted_by or "",
            facet=record.specialty or "",
            popularity=Popularity(views=record.views, rating=record.rating),
        )

    def describe(self, record: MedicalCase) -> str:
        summary = self._summary(record.analysis)
        if summary:
            return summary
        parts = ["Caso"]
        if record.specialty:
            parts.append(f"de {record.specialty}")
        if record.submitted_by:
            parts.append(f"submetido por {record.submitted_by}")
        return " ".join(parts)

    def metadata(self, record: MedicalCase) -> ResultMetadata:
        return ResultMetadata(
            author=record.submitted_by,
            specialty=record.specialty,
            created_at=record.created_at,
        )
