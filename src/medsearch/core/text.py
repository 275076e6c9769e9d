"""Text helpers shared by the scorer and the suggester."""

from __future__ import annotations

import unicodedata


def fold(text: str, strip_accents: bool = False) -> str:
    """Lowercase ``text`` for matching, optionally removing diacritics.

    With ``strip_accents`` the text is NFKD-decomposed and combining marks are
    dropped, so ``"Cirurgia Plástica"`` folds to ``"cirurgia plastica"``.
    """
    text = text.lower()
    if not strip_accents:
        return text
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def tokenize(query: str, strip_accents: bool = False) -> list[str]:
    """Split a query on whitespace into folded, non-empty tokens."""
    return fold(query, strip_accents).split()


def first_paragraph(text: str) -> str:
    """Return the first non-blank line of ``text``, stripped."""
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""
