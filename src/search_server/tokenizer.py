"""Whitespace tokenization for the search server.

Words are split on ASCII spaces only. Case is preserved and punctuation is
kept as part of the word, so ``"cat,"`` and ``"cat"`` are different terms.
"""

from __future__ import annotations

from collections.abc import Container


def split_into_words(text: str) -> list[str]:
    """Split text on runs of spaces, dropping empty tokens and preserving order."""
    return [word for word in text.split(" ") if word]


def split_into_words_no_stop(text: str, stop_words: Container[str]) -> list[str]:
    """Split text like :func:`split_into_words` and drop every stop-word."""
    return [word for word in split_into_words(text) if word not in stop_words]
