"""Filter Stage — Post-scoring predicate filters over search results.

Semantics:
  - AND across dimensions (type, specialty, category)
  - OR within a dimension's value set
  - An inactive dimension (None or empty list) accepts everything
  - An active specialty/category dimension rejects results that lack the
    corresponding metadata field, whatever their kind
"""

from __future__ import annotations

from collections.abc import Iterable

from medsearch.models.query import SearchFilters
from medsearch.models.result import SearchResult


def matches_filters(result: SearchResult, filters: SearchFilters) -> bool:
    """Return True if ``result`` passes every active filter dimension."""
    if filters.type and result.kind.value not in filters.type:
        return False

    if filters.specialty:
        specialty = result.metadata.specialty
        if not specialty or specialty not in filters.specialty:
            return False

    if filters.category:
        category = result.metadata.category
        if not category or category not in filters.category:
            return False

    return True


def apply_filters(results: Iterable[SearchResult], filters: SearchFilters | None) -> list[SearchResult]:
    """Keep the results that pass ``filters``, preserving input order.

    Args:
        results: Scored results in scan order.
        filters: Caller-supplied filters, or None for no filtering.

    Returns:
        The surviving results as a new list.
    """
    if filters is None or filters.is_empty:
        return list(results)
    return [r for r in results if matches_filters(r, filters)]
