"""
Lexicon-based sentiment analysis (tokenizer, scorer, explainer).
"""
from postsentiment.utils.nlp.tokenizer import tokenize, tokenize_batch
from postsentiment.utils.nlp.sentiment_lexicon import LEXICON, Lexicon
from postsentiment.utils.nlp.result import AnalysisResult, SentimentScores
from postsentiment.utils.nlp.scorer import ScoringState, score
from postsentiment.utils.nlp.explainer import explain_tokens
from postsentiment.utils.nlp.analyzer import (
    analyze,
    analyze_batch,
    confidence_level,
    explain,
)

__all__ = [
    "tokenize",
    "tokenize_batch",
    "LEXICON",
    "Lexicon",
    "AnalysisResult",
    "SentimentScores",
    "ScoringState",
    "score",
    "explain_tokens",
    "analyze",
    "analyze_batch",
    "confidence_level",
    "explain",
]
