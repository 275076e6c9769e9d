"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from medsearch.adapters import ArchiveSource, ArticleSource, CaseSource, CourseSource, SourceRegistry
from medsearch.config.settings import Settings
from medsearch.core.engine import SearchEngine
from medsearch.data.loader import Catalog
from medsearch.models.records import ArchiveEntry, Article, Course, MedicalCase


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None, debug=True)  # type: ignore[call-arg]


@pytest.fixture
def rhinoplasty_case() -> MedicalCase:
    return MedicalCase(
        id="caso-1",
        title="Rinoplastia em paciente jovem",
        specialty="Rinoplastia",
        submitted_by="Dr. Brandão",
    )


@pytest.fixture
def techniques_article() -> Article:
    return Article(
        id=7,
        title="Técnicas avançadas",
        summary="Abordagem estruturada na rinoplastia primária.",
        specialty="Dermatologia",
        author="Dr. Ana Couto",
    )


@pytest.fixture
def browlift_course() -> Course:
    return Course(
        id=1,
        title="Browlift & EndomidFace",
        category="TERÇO SUPERIOR E MÉDIO DA FACE",
        description="Cirurgias com cicatrizes reduzidas para rejuvenescimento facial.",
        instructor="Dr. Robério Brandão",
    )


@pytest.fixture
def mammoplasty_entry() -> ArchiveEntry:
    return ArchiveEntry(
        id=4,
        title="Discussão sobre Mamoplastia de Aumento",
        description="Conversa do grupo sobre técnicas e complicações.\nInclui relatos.",
        category="Discussões",
        source="Grupo WhatsApp",
        tags=["mamoplastia", "prótese", "complicações"],
        created_at="2023-12-20",
    )


@pytest.fixture
def catalog(
    rhinoplasty_case: MedicalCase,
    techniques_article: Article,
    browlift_course: Course,
    mammoplasty_entry: ArchiveEntry,
) -> Catalog:
    """One record per kind, none carrying popularity signals."""
    return Catalog(
        cases=[rhinoplasty_case],
        articles=[techniques_article],
        courses=[browlift_course],
        archive=[mammoplasty_entry],
    )


@pytest.fixture
def registry(catalog: Catalog) -> SourceRegistry:
    return catalog.to_registry()


@pytest.fixture
def engine(registry: SourceRegistry, settings: Settings) -> SearchEngine:
    return SearchEngine(registry, settings)


@pytest.fixture
def make_engine(settings: Settings) -> Callable[..., SearchEngine]:
    """Factory building an engine over explicit collections (empty when omitted)."""

    def _make(
        cases: list[MedicalCase] | None = None,
        articles: list[Article] | None = None,
        courses: list[Course] | None = None,
        archive: list[ArchiveEntry] | None = None,
        engine_settings: Settings | None = None,
    ) -> SearchEngine:
        registry = SourceRegistry(
            [
                CaseSource(cases or []),
                ArticleSource(articles or []),
                CourseSource(courses or []),
                ArchiveSource(archive or []),
            ]
        )
        return SearchEngine(registry, engine_settings or settings)

    return _make
