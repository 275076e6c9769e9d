"""Search endpoint — Ranked federated search and type-ahead suggestions.

``GET /v1/search`` serves both operations:

- default — ranked, filtered, paginated results
- ``suggestions=true`` — up to ``limit`` distinct type-ahead strings
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from medsearch.api.deps import get_engine
from medsearch.core.engine import SearchEngine
from medsearch.models.query import SearchFilters, SearchRequest, SuggestRequest
from medsearch.models.response import SearchResponse, SuggestResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _split(value: str | None) -> list[str] | None:
    """Split a comma-separated query parameter; blank means no filter."""
    if not value:
        return None
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return parts or None


@router.get(
    "/search",
    response_model=None,
    summary="Federated Search",
    description=(
        "Search cases, articles, courses and archive entries with a single "
        "relevance-ordered result list.\n\n"
        "Filters take comma-separated values: values within a filter are OR-ed, "
        "filters are AND-ed. With `suggestions=true` the endpoint returns "
        "`{\"suggestions\": [...]}` instead, using `limit` as the suggestion count."
    ),
    responses={
        200: {"model": SearchResponse, "description": "Ranked results, or SuggestResponse when suggestions=true"},
        422: {"description": "Validation error — limit above the configured maximum, or offset < 0"},
        500: {"description": "Internal server error — search processing failed"},
    },
)
async def search(
    engine: Annotated[SearchEngine, Depends(get_engine)],
    q: Annotated[str, Query(description="Free-text query")] = "",
    type: Annotated[str | None, Query(description="Record kinds, e.g. case,article")] = None,
    specialty: Annotated[str | None, Query(description="Specialty labels")] = None,
    category: Annotated[str | None, Query(description="Category labels")] = None,
    limit: Annotated[int | None, Query(ge=1, description="Page size or suggestion count")] = None,
    offset: Annotated[int, Query(ge=0, description="Ranked results to skip")] = 0,
    suggestions: Annotated[bool, Query(description="Return type-ahead suggestions")] = False,
) -> SearchResponse | SuggestResponse:
    """Execute a search or suggestion request."""
    search_settings = engine.settings.search
    if limit is not None and limit > search_settings.max_limit:
        raise HTTPException(status_code=422, detail=f"limit must be at most {search_settings.max_limit}")

    try:
        if suggestions:
            return await engine.suggest(SuggestRequest(query=q, limit=limit or search_settings.suggest_limit))

        filters = SearchFilters(
            type=_split(type),
            specialty=_split(specialty),
            category=_split(category),
        )
        request = SearchRequest(
            query=q,
            filters=filters,
            limit=limit or search_settings.default_limit,
            offset=offset,
        )
        return await engine.search(request)
    except Exception as e:
        logger.error("Search failed: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e
