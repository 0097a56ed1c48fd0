"""
Human-readable rationale for a sentiment analysis.
"""
from __future__ import annotations

from typing import List, Sequence

from postsentiment.utils.nlp.sentiment_lexicon import LEXICON, Lexicon


MAX_LISTED_WORDS = 5


def explain_tokens(tokens: Sequence[str], lexicon: Lexicon = LEXICON) -> str:
    """Summarize which lexicon entries were found in ``tokens``."""
    sentiment_words: List[str] = [t for t in tokens if lexicon.word_weight(t) != 0]
    intensifiers = [t for t in tokens if lexicon.is_intensifier(t)]
    negations = [t for t in tokens if lexicon.is_negation(t)]

    explanation = f"Analyzed {len(tokens)} words. "

    if sentiment_words:
        listed = ", ".join(sentiment_words[:MAX_LISTED_WORDS])
        more = "..." if len(sentiment_words) > MAX_LISTED_WORDS else ""
        explanation += f"Found {len(sentiment_words)} sentiment words: {listed}{more}. "

    if intensifiers:
        explanation += f"Detected {len(intensifiers)} intensifiers. "

    if negations:
        explanation += f"Found {len(negations)} negations affecting sentiment. "

    return explanation
