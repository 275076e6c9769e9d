"""Searchable view — The uniform projection of a domain record that the scorer reads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from medsearch.models.records import RecordKind


class Popularity(BaseModel):
    """Optional popularity signals that bias ranking."""

    model_config = ConfigDict(frozen=True)

    views: float | None = Field(default=None, description="View count")
    rating: float | None = Field(default=None, description="Average rating")


class SearchableRecord(BaseModel):
    """Normalized, adapter-produced projection of a domain record.

    Built fresh per query and never stored. Text fields are never ``None``:
    missing source values degrade to empty strings or an empty tag list.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    kind: RecordKind
    title: str
    body: str = ""
    author: str = ""
    facet: str = ""
    tags: tuple[str, ...] = ()
    popularity: Popularity = Field(default_factory=Popularity)
