"""Tests for ranking (stable descending sort) and pagination."""

from __future__ import annotations

from medsearch.core.ranker import paginate, rank, rank_and_paginate
from medsearch.models.records import RecordKind
from medsearch.models.result import SearchResult


def _result(rid: str, score: float) -> SearchResult:
    return SearchResult(id=rid, title=rid, kind=RecordKind.CASE, url=f"/cases/{rid}", relevance_score=score)


def test_rank_sorts_descending() -> None:
    ranked = rank([_result("a", 10), _result("b", 80), _result("c", 30)])
    assert [r.id for r in ranked] == ["b", "c", "a"]


def test_rank_is_stable_on_ties() -> None:
    ranked = rank([_result("first", 50), _result("high", 90), _result("second", 50), _result("third", 50)])
    assert [r.id for r in ranked] == ["high", "first", "second", "third"]


def test_paginate_returns_pre_slice_total() -> None:
    results = [_result(str(i), 100 - i) for i in range(7)]
    page, total = paginate(results, limit=3, offset=3)
    assert [r.id for r in page] == ["3", "4", "5"]
    assert total == 7


def test_paginate_past_the_end() -> None:
    page, total = paginate([_result("a", 1)], limit=5, offset=10)
    assert page == []
    assert total == 1


def test_zero_limit_returns_empty_page() -> None:
    page, total = rank_and_paginate([_result("a", 1), _result("b", 2)], limit=0, offset=0)
    assert page == []
    assert total == 2
