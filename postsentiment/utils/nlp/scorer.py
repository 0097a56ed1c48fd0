"""
Lexicon-based sentiment scorer.

A single left-to-right pass over the tokens:

- a negation trigger flips and dampens (x -0.8) the sentiment words among the
  next 3 tokens; the trigger itself scores nothing
- an intensifier scales the next scored sentiment word only
- the mean adjusted weight (normalized score) decides the class:
  > 0.3 positive, < -0.3 negative, otherwise neutral

Confidence starts from the score magnitude and is recalibrated by how dense
the sentiment words are and how long the text is, so short or sparse texts
never come out overly confident.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from postsentiment.utils.nlp.result import (
    NEGATIVE,
    NEUTRAL,
    POSITIVE,
    AnalysisResult,
    SentimentScores,
)
from postsentiment.utils.nlp.sentiment_lexicon import LEXICON, Lexicon


NEGATION_WINDOW = 3
NEGATION_FACTOR = -0.8
POSITIVE_THRESHOLD = 0.3
NEGATIVE_THRESHOLD = -0.3
MIN_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.98


@dataclass
class ScoringState:
    """Running state of one scoring pass."""

    total_score: float = 0.0
    sentiment_word_count: int = 0
    pending_intensifier: float = 1.0
    negation_active: bool = False
    negation_age: int = 0

    def advance(self, token: str, lexicon: Lexicon = LEXICON) -> None:
        if lexicon.is_negation(token):
            self.negation_active = True
            self.negation_age = 0
            return

        if self.negation_active:
            self.negation_age += 1
            if self.negation_age > NEGATION_WINDOW:
                self.negation_active = False

        multiplier = lexicon.intensifier_multiplier(token)
        if multiplier != 1.0:
            self.pending_intensifier = multiplier
            return

        weight = lexicon.word_weight(token)
        if weight == 0:
            return

        adjusted = weight * self.pending_intensifier
        if self.negation_active:
            adjusted *= NEGATION_FACTOR
        self.total_score += adjusted
        self.sentiment_word_count += 1
        self.pending_intensifier = 1.0

    @property
    def normalized_score(self) -> float:
        if self.sentiment_word_count == 0:
            return 0.0
        return self.total_score / self.sentiment_word_count


def classify(normalized_score: float) -> str:
    if normalized_score > POSITIVE_THRESHOLD:
        return POSITIVE
    if normalized_score < NEGATIVE_THRESHOLD:
        return NEGATIVE
    return NEUTRAL


def calibrate_confidence(
    sentiment: str,
    normalized_score: float,
    sentiment_word_count: int,
    token_count: int,
) -> float:
    """Heuristic confidence in [0.5, 0.98]."""
    magnitude = abs(normalized_score)
    if sentiment == NEUTRAL:
        confidence = max(0.5, 0.8 - magnitude * 0.5)
    else:
        confidence = min(0.95, 0.6 + magnitude * 0.3)

    density = sentiment_word_count / token_count if token_count else 0.0
    length_factor = min(1.0, token_count / 10)
    confidence *= 0.7 + density * 0.2 + length_factor * 0.1
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, confidence))


def score_distribution(normalized_score: float) -> SentimentScores:
    """Split the normalized score into a positive/negative/neutral distribution."""
    positive = max(0.0, normalized_score)
    negative = max(0.0, -normalized_score)
    # |score| can exceed 1 (weights reach 2.0), so the neutral share is floored.
    neutral = max(0.0, 1.0 - abs(normalized_score))
    total = positive + negative + neutral
    if total <= 0:
        return SentimentScores()
    return SentimentScores(
        positive=positive / total,
        negative=negative / total,
        neutral=neutral / total,
    )


def run_pass(tokens: Sequence[str], lexicon: Lexicon = LEXICON) -> ScoringState:
    state = ScoringState()
    for token in tokens:
        state.advance(token, lexicon)
    return state


def score(tokens: Sequence[str], lexicon: Lexicon = LEXICON) -> AnalysisResult:
    """Score a token sequence and return a fresh AnalysisResult."""
    if not tokens:
        return AnalysisResult()

    state = run_pass(tokens, lexicon)
    normalized = state.normalized_score
    sentiment = classify(normalized)
    confidence = calibrate_confidence(
        sentiment, normalized, state.sentiment_word_count, len(tokens)
    )
    return AnalysisResult(
        sentiment=sentiment,
        confidence=confidence,
        scores=score_distribution(normalized),
        word_count=len(tokens),
        normalized_score=normalized,
    )

