"""Ranker/Paginator — Stable descending sort by relevance, then page slicing."""

from __future__ import annotations

from collections.abc import Sequence

from medsearch.models.result import SearchResult


def rank(results: Sequence[SearchResult]) -> list[SearchResult]:
    """Sort by descending relevance score.

    ``sorted`` is stable, so equal scores keep their scan order.
    """
    return sorted(results, key=lambda r: r.relevance_score, reverse=True)


def paginate(results: Sequence[SearchResult], limit: int, offset: int) -> tuple[list[SearchResult], int]:
    """Slice one page out of ranked results.

    Args:
        results: Ranked, filtered results.
        limit: Page size (non-negative; validated by the caller).
        offset: Number of results to skip (non-negative).

    Returns:
        ``(page, total)`` where ``total`` is the pre-slicing count.
    """
    return list(results[offset : offset + limit]), len(results)


def rank_and_paginate(
    results: Sequence[SearchResult], limit: int, offset: int
) -> tuple[list[SearchResult], int]:
    """Rank then paginate in one step."""
    return paginate(rank(results), limit, offset)
