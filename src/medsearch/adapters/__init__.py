"""Collection adapter layer — One source per indexed record kind.

Built-in sources:
  - cases: clinical cases submitted by members
  - articles: scientific articles from the library
  - courses: academy courses
  - archive: archived discussions and documents

Implement ``CollectionSource`` to index another collection.
"""

from medsearch.adapters.archive.adapter import ArchiveSource
from medsearch.adapters.articles.adapter import ArticleSource
from medsearch.adapters.base import CollectionSource, SourceRegistry
from medsearch.adapters.cases.adapter import CaseSource
from medsearch.adapters.courses.adapter import CourseSource

__all__ = [
    "ArchiveSource",
    "ArticleSource",
    "CaseSource",
    "CollectionSource",
    "CourseSource",
    "SourceRegistry",
]
