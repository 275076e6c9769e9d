"""Domain record models — One pydantic model per indexed collection.

Records arrive from the caller already resident in memory. Each model carries
a ``kind`` literal so that a heterogeneous list can be parsed through the
``DomainRecord`` discriminated union. Optional fields default to ``None`` or an
empty list; adapters degrade missing values to empty strings.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecordKind(str, Enum):
    """Origin collection of a record."""

    CASE = "case"
    ARTICLE = "article"
    COURSE = "course"
    ARCHIVE = "archive"


class _Record(BaseModel):
    """Fields shared by every domain record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(description="Identifier, unique within its own collection")
    title: str = Field(description="Record title")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> str:
        """Numeric ids from source data are stored as strings."""
        return str(v)

    @field_validator("created_at", "published_at", mode="before", check_fields=False)
    @classmethod
    def _coerce_timestamp(cls, v: Any) -> str | None:
        """YAML dates and numeric timestamps are kept as their string form."""
        if v is None:
            return None
        return v.isoformat() if hasattr(v, "isoformat") else str(v)


class MedicalCase(_Record):
    """A clinical case submitted by a member."""

    kind: Literal["case"] = "case"
    specialty: str | None = Field(default=None, description="Surgical specialty")
    submitted_by: str | None = Field(default=None, alias="submittedBy", description="Submitting surgeon")
    status: str | None = Field(default=None, description="Review status")
    image_url: str | None = Field(default=None, alias="imageUrl")
    analysis: str | None = Field(default=None, description="Free-text case analysis")
    created_at: str | None = Field(default=None, alias="createdAt")
    views: float | None = None
    rating: float | None = None


class Article(_Record):
    """A scientific article from the library."""

    kind: Literal["article"] = "article"
    authors: str | None = Field(default=None, description="Full author list")
    author: str | None = Field(default=None, description="Lead author")
    journal: str | None = None
    year: int | None = None
    specialty: str | None = None
    abstract: str | None = None
    summary: str | None = None
    views: float | None = None
    rating: float | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    published_at: str | None = Field(default=None, alias="publishedAt")
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_or_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class Course(_Record):
    """An academy course."""

    kind: Literal["course"] = "course"
    category: str | None = None
    section: str | None = Field(default=None, description="Catalogue section the course is listed under")
    description: str | None = None
    instructor: str | None = None
    rating: float | None = None
    students: int | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")


class ArchiveEntry(_Record):
    """An archived discussion or document."""

    kind: Literal["archive"] = "archive"
    description: str | None = None
    category: str | None = None
    source: str | None = Field(default=None, description="Where the entry was collected from")
    tags: list[str] = Field(default_factory=list)
    created_at: str | None = Field(default=None, alias="createdAt")
    views: float | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_or_empty(cls, v: Any) -> Any:
        return [] if v is None else v


DomainRecord = Annotated[
    MedicalCase | Article | Course | ArchiveEntry,
    Field(discriminator="kind"),
]
