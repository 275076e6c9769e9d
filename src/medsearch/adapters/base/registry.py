"""Source Registry — Holds one collection source per record kind.

Iteration always follows the fixed scan order Cases → Articles → Courses →
Archive, whatever order sources were registered in. Scan order decides how
equal scores are tie-broken.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from medsearch.adapters.base.adapter import CollectionSource
from medsearch.exceptions import SourceNotFoundError
from medsearch.models.records import RecordKind

logger = logging.getLogger(__name__)

SCAN_ORDER: tuple[RecordKind, ...] = (
    RecordKind.CASE,
    RecordKind.ARTICLE,
    RecordKind.COURSE,
    RecordKind.ARCHIVE,
)


class SourceRegistry:
    """Registry of collection sources keyed by record kind.

    Example:
        >>> registry = SourceRegistry()
        >>> registry.register(CaseSource(cases))
        >>> registry.register(ArticleSource(articles))
        >>> [s.kind for s in registry]
        [<RecordKind.CASE: 'case'>, <RecordKind.ARTICLE: 'article'>]
    """

    def __init__(self, sources: list[CollectionSource[Any]] | None = None) -> None:
        self._sources: dict[RecordKind, CollectionSource[Any]] = {}
        for source in sources or []:
            self.register(source)

    def register(self, source: CollectionSource[Any]) -> None:
        """Register a source, replacing any existing source of the same kind.

        Args:
            source: The collection source to register.
        """
        if source.kind in self._sources:
            logger.warning("Replacing existing source for kind: %s", source.kind.value)
        self._sources[source.kind] = source
        logger.info("Registered %s source with %d records", source.kind.value, len(source))

    def get(self, kind: RecordKind) -> CollectionSource[Any]:
        """Get the source registered for ``kind``.

        Raises:
            SourceNotFoundError: If no source is registered for this kind.
        """
        if kind not in self._sources:
            raise SourceNotFoundError(
                f"No source registered for kind '{kind.value}'. "
                f"Registered kinds: {[k.value for k in self.kinds]}"
            )
        return self._sources[kind]

    def __iter__(self) -> Iterator[CollectionSource[Any]]:
        for kind in SCAN_ORDER:
            if kind in self._sources:
                yield self._sources[kind]

    def __len__(self) -> int:
        return len(self._sources)

    @property
    def kinds(self) -> list[RecordKind]:
        """Registered kinds in scan order."""
        return [source.kind for source in self]

    def counts(self) -> dict[str, int]:
        """Number of records per registered kind, in scan order."""
        return {source.kind.value: len(source) for source in self}

    def titles(self) -> Iterator[str]:
        """All record titles in scan order."""
        for source in self:
            for record in source.records():
                yield source.to_searchable(record).title
