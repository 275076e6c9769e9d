"""Tests for the relevance scorer (title tiers, field weights, popularity)."""

from __future__ import annotations

import pytest

from medsearch.config.settings import ScoringWeights
from medsearch.core.scorer import RelevanceScorer
from medsearch.models.records import RecordKind
from medsearch.models.searchable import Popularity, SearchableRecord


def _record(title: str = "Sem relação", **kwargs) -> SearchableRecord:
    return SearchableRecord(id="r1", kind=RecordKind.CASE, title=title, **kwargs)


@pytest.fixture
def scorer() -> RelevanceScorer:
    return RelevanceScorer()


class TestTitleTiers:
    """Exact > prefix > contains, one tier per token."""

    def test_exact_title(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record("Rinoplastia"), "rinoplastia") == 100

    def test_prefix_title(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record("Rinoplastia secundária"), "rinoplastia") == 80

    def test_contains_title(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record("Caso de rinoplastia"), "rinoplastia") == 60

    def test_tiers_are_strictly_ordered(self, scorer: RelevanceScorer) -> None:
        exact = scorer.score(_record("Lifting"), "lifting")
        prefix = scorer.score(_record("Lifting facial"), "lifting")
        contains = scorer.score(_record("Mini lifting"), "lifting")
        assert exact > prefix > contains > 0

    def test_only_best_tier_fires(self, scorer: RelevanceScorer) -> None:
        """An exact match does not also collect prefix or contains points."""
        assert scorer.score(_record("Lifting"), "lifting") == 100

    def test_tokens_score_independently(self, scorer: RelevanceScorer) -> None:
        # "rinoplastia" is a prefix (80), "secundária" is contained (60)
        assert scorer.score(_record("Rinoplastia secundária"), "rinoplastia secundária") == 140

    def test_repeated_token_scores_twice(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record("Caso de rinoplastia"), "rinoplastia rinoplastia") == 120

    def test_case_insensitive(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record("RINOPLASTIA"), "Rinoplastia") == 100


class TestFieldWeights:
    def test_body(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record(body="Discussão sobre rinoplastia"), "rinoplastia") == 30

    def test_author(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record(author="Dr. Brandão"), "brandão") == 25

    def test_facet(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record(facet="Blefaroplastia"), "blefaroplastia") == 40

    def test_each_matching_tag_counts(self, scorer: RelevanceScorer) -> None:
        record = _record(tags=("mamoplastia", "mamoplastia de aumento", "prótese"))
        assert scorer.score(record, "mamoplastia") == 40

    def test_fields_sum(self, scorer: RelevanceScorer) -> None:
        record = _record(
            "Rinoplastia em paciente jovem",
            body="Rinoplastia estruturada",
            author="Equipe de rinoplastia",
            facet="Rinoplastia",
            tags=("rinoplastia",),
        )
        assert scorer.score(record, "rinoplastia") == 80 + 30 + 25 + 40 + 20

    def test_no_hits_scores_zero(self, scorer: RelevanceScorer) -> None:
        record = _record("Lifting facial", body="Técnica", author="Dr. X", facet="Lifting")
        assert scorer.score(record, "mamoplastia") == 0

    def test_whitespace_tokenization(self, scorer: RelevanceScorer) -> None:
        assert scorer.tokenize("  Rinoplastia\tSECUNDÁRIA \n") == ["rinoplastia", "secundária"]

    def test_no_tokens_scores_zero(self, scorer: RelevanceScorer) -> None:
        assert scorer.score_tokens(_record("Rinoplastia"), []) == 0


class TestPopularityBoost:
    def test_views_boost(self, scorer: RelevanceScorer) -> None:
        record = _record(popularity=Popularity(views=500))
        assert scorer.score(record, "inexistente") == 5

    def test_views_boost_is_capped(self, scorer: RelevanceScorer) -> None:
        record = _record(popularity=Popularity(views=50_000))
        assert scorer.score(record, "inexistente") == 10

    def test_rating_boost(self, scorer: RelevanceScorer) -> None:
        record = _record(popularity=Popularity(rating=4.5))
        assert scorer.score(record, "inexistente") == 9

    def test_boost_applied_once_regardless_of_tokens(self, scorer: RelevanceScorer) -> None:
        record = _record("Caso de rinoplastia", popularity=Popularity(views=200, rating=4))
        # "rinoplastia" is contained (60), "caso" is a prefix (80)
        assert scorer.score(record, "rinoplastia caso") == 60 + 80 + 2 + 8

    def test_score_is_never_negative(self, scorer: RelevanceScorer) -> None:
        record = _record(popularity=Popularity(rating=-3))
        assert scorer.score(record, "inexistente") == 0


class TestAccentFolding:
    def test_accents_matter_by_default(self, scorer: RelevanceScorer) -> None:
        assert scorer.score(_record("Rinoplastia"), "rinoplástia") == 0

    def test_accents_folded_when_enabled(self) -> None:
        scorer = RelevanceScorer(strip_accents=True)
        assert scorer.score(_record("Rinoplastia"), "rinoplástia") == 100
        assert scorer.score(_record("Cirurgia Plástica"), "plastica") == 60


def test_custom_weights() -> None:
    scorer = RelevanceScorer(weights=ScoringWeights(title_exact=10, facet=1))
    record = _record("Lifting", facet="Lifting")
    assert scorer.score(record, "lifting") == 11
