"""Catalogue loader — Builds in-memory collections from a YAML or JSON file.

Expected layout (every key optional)::

    cases: [...]
    articles: [...]
    courses: [...]
    course_sections:
      - title: Outros Cursos
        courses: [...]
    archive: [...]
    records:            # optional mixed list, each item tagged with `kind`
      - {kind: case, id: c9, title: ...}

Courses listed under ``course_sections`` inherit the section title and are
appended after the top-level ``courses``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, ValidationError, model_validator

from medsearch.adapters import ArchiveSource, ArticleSource, CaseSource, CourseSource, SourceRegistry
from medsearch.exceptions import CatalogError
from medsearch.models.records import ArchiveEntry, Article, Course, DomainRecord, MedicalCase

logger = logging.getLogger(__name__)


class CourseSection(BaseModel):
    """A titled group of courses in the academy catalogue."""

    title: str
    courses: list[Course] = Field(default_factory=list)


class Catalog(BaseModel):
    """All four collections, in natural enumeration order."""

    cases: list[MedicalCase] = Field(default_factory=list)
    articles: list[Article] = Field(default_factory=list)
    courses: list[Course] = Field(default_factory=list)
    course_sections: list[CourseSection] = Field(default_factory=list)
    archive: list[ArchiveEntry] = Field(default_factory=list)
    records: list[DomainRecord] = Field(
        default_factory=list,
        description="Mixed records tagged with a `kind`, appended to their typed collection",
    )

    @model_validator(mode="after")
    def _distribute_records(self) -> Catalog:
        targets: dict[str, list[Any]] = {
            "case": self.cases,
            "article": self.articles,
            "course": self.courses,
            "archive": self.archive,
        }
        for record in self.records:
            targets[record.kind].append(record)
        self.records = []
        return self

    def all_courses(self) -> list[Course]:
        """Top-level courses followed by section courses tagged with their section."""
        courses = list(self.courses)
        for section in self.course_sections:
            for course in section.courses:
                courses.append(course if course.section else course.model_copy(update={"section": section.title}))
        return courses

    def to_registry(self) -> SourceRegistry:
        """Wrap each collection in its source and register all four."""
        return SourceRegistry(
            [
                CaseSource(self.cases),
                ArticleSource(self.articles),
                CourseSource(self.all_courses()),
                ArchiveSource(self.archive),
            ]
        )


def _read(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_catalog(path: str | Path) -> Catalog:
    """Load and validate a catalogue file.

    Args:
        path: Path to a ``.yaml``/``.yml`` or ``.json`` file.

    Returns:
        The validated catalogue.

    Raises:
        CatalogError: If the file is missing, unparsable, or fails validation.
    """
    catalog_path = Path(path)
    try:
        data = _read(catalog_path) or {}
    except FileNotFoundError as e:
        raise CatalogError(f"Catalogue file not found: {catalog_path}") from e
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogError(f"Cannot parse catalogue {catalog_path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"Catalogue {catalog_path} must contain a mapping at the top level")

    try:
        catalog = Catalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalogue {catalog_path}: {e}") from e

    logger.info(
        "Loaded catalogue %s: %d cases, %d articles, %d courses, %d archive entries",
        catalog_path,
        len(catalog.cases),
        len(catalog.articles),
        len(catalog.all_courses()),
        len(catalog.archive),
    )
    return catalog
