"""Response models — Structured output of search and suggest calls."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from medsearch.models.query import SearchFilters
from medsearch.models.result import SearchResult


class Pagination(BaseModel):
    """Page window echoed back to the caller."""

    model_config = ConfigDict(populate_by_name=True)

    limit: int
    offset: int
    has_more: bool = Field(alias="hasMore", description="True when results remain past this page")


class SearchResponse(BaseModel):
    """One page of ranked results plus the post-filter total."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[SearchResult] = Field(default_factory=list)
    total: int = Field(default=0, description="Post-filter, pre-pagination result count")
    query: str = ""
    filters: SearchFilters = Field(default_factory=SearchFilters)
    pagination: Pagination
    processing_time_ms: int = Field(default=0, alias="processingTimeMs")


class SuggestResponse(BaseModel):
    """Distinct type-ahead strings in priority order."""

    suggestions: list[str] = Field(default_factory=list)
