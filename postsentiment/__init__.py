"""
Lexicon-based sentiment analysis for short posts.
"""
from postsentiment.utils.nlp import (
    AnalysisResult,
    SentimentScores,
    analyze,
    analyze_batch,
    confidence_level,
    explain,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "SentimentScores",
    "analyze",
    "analyze_batch",
    "confidence_level",
    "explain",
]
