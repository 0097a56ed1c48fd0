"""
Text-level entry points: tokenize then score or explain.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from postsentiment.utils.nlp.explainer import explain_tokens
from postsentiment.utils.nlp.result import AnalysisResult
from postsentiment.utils.nlp.scorer import score
from postsentiment.utils.nlp.tokenizer import tokenize

logger = logging.getLogger(__name__)


CONFIDENCE_LEVELS = (
    (0.9, "Very High"),
    (0.8, "High"),
    (0.7, "Medium"),
    (0.6, "Low"),
)


def analyze(text: str) -> AnalysisResult:
    """Classify ``text`` as positive, negative or neutral."""
    tokens = tokenize(text)
    result = score(tokens)
    logger.debug("analyzed %d tokens -> %s (%.3f)", len(tokens), result.sentiment, result.confidence)
    return result


def explain(text: str) -> str:
    """Describe the lexicon matches that drive the analysis of ``text``."""
    return explain_tokens(tokenize(text))


def confidence_level(confidence: float) -> str:
    """Map a confidence value to a display label."""
    for threshold, label in CONFIDENCE_LEVELS:
        if confidence >= threshold:
            return label
    return "Very Low"


def analyze_batch(texts: Sequence[str]) -> List[AnalysisResult]:
    """Analyze each text independently, preserving input order."""
    return [analyze(text) for text in texts]
