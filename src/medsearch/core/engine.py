"""MedSearch Engine — Federated search over every registered collection.

The engine runs one search per call:
  1. Aggregation: adapt and score every record of every source
  2. Filtering: apply the caller's type/specialty/category filters
  3. Ranking: stable sort by descending relevance
  4. Pagination: slice the requested page and report the total

Suggestions take a separate, cheaper path that only substring-matches titles
and known facet labels.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from medsearch.adapters.base.adapter import CollectionSource
from medsearch.adapters.base.registry import SourceRegistry
from medsearch.config.settings import Settings
from medsearch.core.filters import apply_filters
from medsearch.core.ranker import rank_and_paginate
from medsearch.core.scorer import RelevanceScorer
from medsearch.core.suggester import Suggester
from medsearch.data.loader import load_catalog
from medsearch.models.query import SearchRequest, SuggestRequest
from medsearch.models.response import Pagination, SearchResponse, SuggestResponse
from medsearch.models.result import SearchResult
logger = logging.getLogger(__name__)


class SearchEngine:
    """Core orchestrator for federated search and suggestions.

    Pipeline:
      Query → [Sources + Scorer] → scored results (score > 0, scan order)
            → [Filters] → [Ranker] → [Paginator] → SearchResponse

    Every call is stateless: results are computed from the registry's current
    collections and nothing is cached between calls.

    Attributes:
        settings: Application configuration.
        registry: Collection sources, iterated in scan order.
        scorer: Relevance scorer.
        suggester: Type-ahead suggester.
    """

    def __init__(self, registry: SourceRegistry, settings: Settings | None = None) -> None:
        self.settings = settings or Settings(_env_file=None)  # type: ignore[call-arg]
        self.registry = registry
        search_settings = self.settings.search
        self.scorer = RelevanceScorer(
            weights=search_settings.weights,
            strip_accents=search_settings.normalize_accents,
        )
        self.suggester = Suggester(
            vocabulary=search_settings.facet_vocabulary,
            min_length=search_settings.min_suggest_length,
            strip_accents=search_settings.normalize_accents,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchEngine:
        """Build an engine whose collections come from ``settings.search.data_path``.

        With no data path configured the engine starts with empty sources.
        """
        if settings.search.data_path is None:
            logger.warning("No catalogue configured (MEDSEARCH_SEARCH__DATA_PATH); collections are empty")
            return cls(SourceRegistry(), settings)
        catalog = load_catalog(settings.search.data_path)
        return cls(catalog.to_registry(), settings)

    # ──────────────────────────────────────────────────────────────────────
    # Search
    # ──────────────────────────────────────────────────────────────────────

    async def search(self, request: SearchRequest) -> SearchResponse:
        """Run a full search and return one page of ranked results.

        A blank query (empty or whitespace-only) returns no results without
        scoring anything.

        Args:
            request: Query, filters and page window.

        Returns:
            A SearchResponse whose ``total`` counts every filtered match.
        """
        start_time = time.monotonic()

        matches = await self.collect(request.query)
        filtered = apply_filters(matches, request.filters)
        page, total = rank_and_paginate(filtered, request.limit, request.offset)

        processing_time_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            "Search '%s': %d matched, %d after filters, %d returned in %dms",
            request.query,
            len(matches),
            total,
            len(page),
            processing_time_ms,
        )

        return SearchResponse(
            results=page,
            total=total,
            query=request.query,
            filters=request.filters,
            pagination=Pagination(
                limit=request.limit,
                offset=request.offset,
                has_more=request.offset + request.limit < total,
            ),
            processing_time_ms=processing_time_ms,
        )

    async def collect(self, query: str) -> list[SearchResult]:
        """Score every record of every source and keep the positive ones.

        Each source is scanned by its own ``_scan`` coroutine under
        ``asyncio.gather``. Scoring never awaits, so the scans run one after
        another on the event loop; ``gather`` returns their results in
        registry scan order, which keeps the merged list deterministic.

        Args:
            query: The raw query string.

        Returns:
            Unfiltered, unsorted matches in scan order.
        """
        if not query.strip():
            return []

        tokens = self.scorer.tokenize(query)
        per_source = await asyncio.gather(*(self._scan(source, tokens) for source in self.registry))
        return [result for results in per_source for result in results]

    async def _scan(self, source: CollectionSource[Any], tokens: list[str]) -> list[SearchResult]:
        """Score one collection."""
        results: list[SearchResult] = []
        for record in source.records():
            score = self.scorer.score_tokens(source.to_searchable(record), tokens)
            if score > 0:
                results.append(source.to_result(record, score))
        logger.debug("Scanned %s: %d records, %d matched", source.kind.value, len(source), len(results))
        return results

    # ──────────────────────────────────────────────────────────────────────
    # Suggestions
    # ──────────────────────────────────────────────────────────────────────

    async def suggest(self, request: SuggestRequest) -> SuggestResponse:
        """Return distinct type-ahead strings for a partial query.

        Titles are scanned in collection order first, then the facet
        vocabulary; both stop once ``request.limit`` strings are found.
        """
        suggestions = self.suggester.suggest(request.query, self.registry.titles(), request.limit)
        return SuggestResponse(suggestions=suggestions)
