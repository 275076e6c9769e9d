"""Relevance Scorer — Term-presence weighting across the fields of a searchable record.

Scoring rules (per query token, summed over tokens):
  - Title: exact match → title_exact; prefix → title_prefix;
    contained elsewhere → title_contains. Only the best tier fires.
  - Body contains token → body
  - Author contains token → author
  - Facet contains token → facet
  - Each tag containing the token → tag (cumulative across tags)

Popularity boost, once per record:
  - views → min(views / views_divisor, views_cap)
  - rating → rating * rating_multiplier

A record with no token hits and no popularity signals scores exactly 0.
"""

from __future__ import annotations

from collections.abc import Sequence

from medsearch.config.settings import ScoringWeights
from medsearch.core.text import fold, tokenize
from medsearch.models.searchable import SearchableRecord


class RelevanceScorer:
    """Maps a searchable record and a query to a non-negative relevance score.

    The scorer is stateless apart from its configuration and can be shared
    across concurrent searches.

    Attributes:
        weights: Points awarded per kind of hit.
        strip_accents: Whether matching ignores diacritics.
    """

    def __init__(self, weights: ScoringWeights | None = None, strip_accents: bool = False) -> None:
        self.weights = weights or ScoringWeights()
        self.strip_accents = strip_accents

    def tokenize(self, query: str) -> list[str]:
        """Tokenize a query using this scorer's folding rules."""
        return tokenize(query, self.strip_accents)

    def score(self, record: SearchableRecord, query: str) -> float:
        """Score ``record`` against a raw query string."""
        return self.score_tokens(record, self.tokenize(query))

    def score_tokens(self, record: SearchableRecord, tokens: Sequence[str]) -> float:
        """Score ``record`` against already-tokenized query terms.

        Args:
            record: The searchable view of a domain record.
            tokens: Folded query tokens (see :meth:`tokenize`).

        Returns:
            The total relevance score, never negative.
        """
        w = self.weights
        title = fold(record.title, self.strip_accents)
        body = fold(record.body, self.strip_accents)
        author = fold(record.author, self.strip_accents)
        facet = fold(record.facet, self.strip_accents)
        tags = [fold(tag, self.strip_accents) for tag in record.tags]

        score = 0.0
        for token in tokens:
            score += self._title_points(title, token)
            if token in body:
                score += w.body
            if token in author:
                score += w.author
            if token in facet:
                score += w.facet
            score += w.tag * sum(1 for tag in tags if token in tag)

        return max(0.0, score + self._popularity_boost(record))

    def _title_points(self, title: str, token: str) -> float:
        """Points for the highest title tier the token reaches."""
        if token not in title:
            return 0.0
        if title == token:
            return self.weights.title_exact
        if title.startswith(token):
            return self.weights.title_prefix
        return self.weights.title_contains

    def _popularity_boost(self, record: SearchableRecord) -> float:
        w = self.weights
        boost = 0.0
        views = record.popularity.views
        rating = record.popularity.rating
        if views:
            boost += min(views / w.views_divisor, w.views_cap)
        if rating:
            boost += rating * w.rating_multiplier
        return boost
