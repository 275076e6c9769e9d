"""Tests for the source registry (scan order, replacement, lookup)."""

from __future__ import annotations

import pytest

from medsearch.adapters import ArchiveSource, ArticleSource, CaseSource, CourseSource, SourceRegistry
from medsearch.exceptions import SourceNotFoundError
from medsearch.models.records import Article, MedicalCase, RecordKind


def test_iterates_in_scan_order() -> None:
    registry = SourceRegistry()
    registry.register(ArchiveSource())
    registry.register(CourseSource())
    registry.register(CaseSource())
    registry.register(ArticleSource())
    assert registry.kinds == [RecordKind.CASE, RecordKind.ARTICLE, RecordKind.COURSE, RecordKind.ARCHIVE]


def test_replaces_source_of_same_kind() -> None:
    registry = SourceRegistry([CaseSource([MedicalCase(id="1", title="Antigo")])])
    registry.register(CaseSource([MedicalCase(id="2", title="Novo"), MedicalCase(id="3", title="Outro")]))
    assert len(registry) == 1
    assert registry.counts() == {"case": 2}


def test_get_unregistered_kind_raises() -> None:
    registry = SourceRegistry([CaseSource()])
    with pytest.raises(SourceNotFoundError, match="article"):
        registry.get(RecordKind.ARTICLE)


def test_get_registered_kind() -> None:
    source = ArticleSource()
    assert SourceRegistry([source]).get(RecordKind.ARTICLE) is source


def test_titles_follow_scan_order() -> None:
    registry = SourceRegistry(
        [
            ArticleSource([Article(id=1, title="Artigo")]),
            CaseSource([MedicalCase(id="c", title="Caso")]),
        ]
    )
    assert list(registry.titles()) == ["Caso", "Artigo"]
