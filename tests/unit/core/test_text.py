"""Tests for text folding helpers."""

from __future__ import annotations

from medsearch.core.text import first_paragraph, fold, tokenize


def test_fold_lowercases_only_by_default() -> None:
    assert fold("Cirurgia Plástica") == "cirurgia plástica"


def test_fold_strips_accents() -> None:
    assert fold("Cirurgia Plástica Estética", strip_accents=True) == "cirurgia plastica estetica"


def test_tokenize_drops_empty_tokens() -> None:
    assert tokenize("   ") == []
    assert tokenize("a  b") == ["a", "b"]


def test_first_paragraph_skips_blank_lines() -> None:
    assert first_paragraph("\n\n  Primeira linha  \nSegunda") == "Primeira linha"
    assert first_paragraph("") == ""
