"""Query models — Filters and request parameters for search and suggest."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchFilters(BaseModel):
    """Optional post-scoring filters.

    Each dimension is an OR-set of accepted values; dimensions combine with AND.
    ``None`` or an empty list means the dimension is inactive.
    """

    type: list[str] | None = Field(default=None, description="Accepted record kinds (case, article, course, archive)")
    specialty: list[str] | None = Field(default=None, description="Accepted specialty labels")
    category: list[str] | None = Field(default=None, description="Accepted category labels")

    @property
    def is_empty(self) -> bool:
        return not (self.type or self.specialty or self.category)


class SearchRequest(BaseModel):
    """A free-text search over every registered collection."""

    query: str = Field(default="", description="Free-text query; blank queries match nothing")
    filters: SearchFilters = Field(default_factory=SearchFilters)
    limit: int = Field(default=20, ge=0, description="Page size")
    offset: int = Field(default=0, ge=0, description="Number of ranked results to skip")


class SuggestRequest(BaseModel):
    """A type-ahead lookup for a partial query."""

    query: str = Field(default="", description="Partial query typed so far")
    limit: int = Field(default=5, ge=0, description="Maximum number of suggestions")
