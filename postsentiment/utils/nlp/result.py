"""
Result records returned by the sentiment analyzer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"

SENTIMENT_LABELS = (POSITIVE, NEGATIVE, NEUTRAL)


@dataclass(frozen=True)
class SentimentScores:
    """3-way distribution over the sentiment classes, summing to 1.0."""

    positive: float = 0.0
    negative: float = 0.0
    neutral: float = 1.0

    def to_dict(self) -> Dict[str, float]:
        return {"positive": self.positive, "negative": self.negative, "neutral": self.neutral}


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analysing one text. Immutable once returned."""

    sentiment: str = NEUTRAL
    confidence: float = 0.5
    scores: SentimentScores = field(default_factory=SentimentScores)
    word_count: int = 0
    normalized_score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sentiment": self.sentiment,
            "confidence": self.confidence,
            "scores": self.scores.to_dict(),
            "wordCount": self.word_count,
            "normalizedScore": self.normalized_score,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AnalysisResult":
        scores = raw.get("scores") or {}
        return cls(
            sentiment=raw.get("sentiment", NEUTRAL),
            confidence=float(raw.get("confidence", 0.5)),
            scores=SentimentScores(
                positive=float(scores.get("positive", 0.0)),
                negative=float(scores.get("negative", 0.0)),
                neutral=float(scores.get("neutral", 1.0)),
            ),
            word_count=int(raw.get("wordCount", 0)),
            normalized_score=float(raw.get("normalizedScore", 0.0)),
        )
