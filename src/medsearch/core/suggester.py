"""Suggester — Cheap substring lookup for type-ahead.

Candidates come from two sources in priority order:
  1. Titles of indexed records, in collection scan order
  2. A fixed vocabulary of facet labels

Both stop as soon as ``limit`` distinct strings are collected. This path does
not use the relevance scorer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from medsearch.core.text import fold

logger = logging.getLogger(__name__)


class Suggester:
    """Collects distinct literal strings containing a partial query.

    Attributes:
        vocabulary: Facet labels offered after titles.
        min_length: Partial queries shorter than this get no suggestions.
        strip_accents: Whether matching ignores diacritics.
    """

    def __init__(
        self,
        vocabulary: Sequence[str] = (),
        min_length: int = 2,
        strip_accents: bool = False,
    ) -> None:
        self.vocabulary = list(vocabulary)
        self.min_length = min_length
        self.strip_accents = strip_accents

    def suggest(self, partial: str, titles: Iterable[str], limit: int = 5) -> list[str]:
        """Return up to ``limit`` distinct suggestions for ``partial``.

        Args:
            partial: The text typed so far.
            titles: Record titles in deterministic scan order.
            limit: Maximum number of suggestions.

        Returns:
            Suggestions in the order they were found, without duplicates.
        """
        if not partial.strip() or len(partial) < self.min_length or limit <= 0:
            return []

        needle = fold(partial, self.strip_accents)
        found: dict[str, None] = {}

        for candidates in (titles, self.vocabulary):
            for candidate in candidates:
                if len(found) >= limit:
                    break
                if candidate not in found and needle in fold(candidate, self.strip_accents):
                    found[candidate] = None

        logger.debug("Suggestions for %r: %d found", partial, len(found))
        return list(found)
