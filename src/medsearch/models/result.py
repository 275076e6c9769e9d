"""Search result model — Unified output record for every collection kind."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from medsearch.models.records import RecordKind


class ResultMetadata(BaseModel):
    """Kind-specific metadata attached to a result.

    Only the fields a kind actually carries are set; the others stay ``None``.
    The specialty and category filters read ``specialty`` and ``category`` here.
    """

    model_config = ConfigDict(populate_by_name=True)

    author: str | None = None
    specialty: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    views: float | None = None
    rating: float | None = None


class SearchResult(BaseModel):
    """A single scored match returned to the caller.

    ``relevance_score`` is always strictly positive: records that score zero
    are dropped by the engine rather than ranked last.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Record identifier within its collection")
    title: str = Field(description="Record title")
    description: str = Field(default="", description="At most one paragraph of descriptive text")
    kind: RecordKind = Field(alias="type", description="Origin collection")
    url: str = Field(description="Route to the record in the UI")
    image_url: str | None = Field(default=None, alias="imageUrl")
    metadata: ResultMetadata = Field(default_factory=ResultMetadata)
    relevance_score: float = Field(alias="relevanceScore", gt=0, description="Relevance score (> 0)")
