"""Course source — Academy courses.

Courses listed under a catalogue section without their own category take
the section title as their facet.
"""

from __future__ import annotations

from medsearch.adapters.base.adapter import CollectionSource
from medsearch.models.records import Course, RecordKind
from medsearch.models.result import ResultMetadata
from medsearch.models.searchable import Popularity, SearchableRecord


class CourseSource(CollectionSource[Course]):
    """Collection source for ``Course`` records."""

    kind = RecordKind.COURSE
    default_url_prefix = "/academy"

    @staticmethod
    def _category(record: Course) -> str | None:
        return record.category or record.section

    def to_searchable(self, record: Course) -> SearchableRecord:
        return SearchableRecord(
            id=record.id,
            kind=self.kind,
            title=record.title,
            body=record.description or "",
            author=record.instructor or "",
            facet=self._category(record) or "",
            popularity=Popularity(rating=record.rating),
        )

    def describe(self, record: Course) -> str:
        summary = self._summary(record.description)
        if summary:
            return summary
        category = self._category(record)
        return f"Curso de {category}" if category else ""

    def metadata(self, record: Course) -> ResultMetadata:
        return ResultMetadata(
            author=record.instructor,
            category=self._category(record),
            rating=record.rating,
        )
