"""
Word tokenizer with light normalization.
"""
from __future__ import annotations

from typing import List
import re


# Apostrophes survive so contractions like "don't" stay one token.
_NON_WORD_RE = re.compile(r"[^\w\s']")
_MULTI_SPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Lower-case ``text`` and split it into word tokens."""
    if not text:
        return []
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    cleaned = _MULTI_SPACE_RE.sub(" ", cleaned).strip()
    if not cleaned:
        return []
    return [t for t in cleaned.split(" ") if t]


def tokenize_batch(texts: List[str]) -> List[List[str]]:
    """Tokenize a batch of texts."""
    return [tokenize(t) for t in texts]
