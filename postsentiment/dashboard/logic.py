"""
Pure helpers for the dashboard: input validation, history updates, stat cards.
"""
from __future__ import annotations

from typing import Any, Dict, List, MutableMapping, Optional

from postsentiment.utils.analysis_tools import sentiment_distribution_stats
from postsentiment.utils.history import HistoryEntry, SessionHistory
from postsentiment.utils.nlp import analyze, confidence_level, explain


HISTORY_KEY = "sentiment_history"


def validate_post_text(text: Optional[str], max_chars: int = 280) -> List[str]:
    """Validate the post form before analysis."""
    errors: List[str] = []
    if not str(text or "").strip():
        errors.append("Please enter some text to analyze.")
        return errors
    if len(text) > max_chars:
        errors.append(f"Post is {len(text)} characters; the limit is {max_chars}.")
    return errors


def get_history(state: MutableMapping[str, Any], max_entries: int = 20) -> SessionHistory:
    """Return the session history stored in ``state``, creating it on first use."""
    history = state.get(HISTORY_KEY)
    if not isinstance(history, SessionHistory) or history.max_entries != max_entries:
        fresh = SessionHistory(max_entries=max_entries)
        if isinstance(history, SessionHistory):
            for entry in reversed(history.entries):
                fresh.add(entry.text, entry.result, entry.explanation, entry.timestamp)
        history = fresh
        state[HISTORY_KEY] = history
    return history


def submit_post(history: SessionHistory, text: str) -> HistoryEntry:
    """Analyse ``text`` and prepend it to ``history``."""
    result = analyze(text)
    return history.add(text, result, explain(text))


def completion_message(entry: HistoryEntry) -> str:
    level = confidence_level(entry.result.confidence)
    return f"Analysis complete: {entry.result.sentiment} sentiment ({level} confidence)!"


def build_stat_cards(records: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Four summary cards: one per sentiment class plus average confidence."""
    stats = sentiment_distribution_stats(records)
    data = stats.get("data", {})
    if not data:
        return []
    distribution = data["distribution"]
    cards = []
    for label in ("positive", "negative", "neutral"):
        cards.append({
            "title": f"{label.capitalize()} Sentiment",
            "value": str(distribution[label]["count"]),
            "detail": f"{distribution[label]['percentage']:.1f}% of total",
        })
    cards.append({
        "title": "Average Confidence",
        "value": f"{data['avg_confidence'] * 100:.1f}%",
        "detail": confidence_level(data["avg_confidence"]),
    })
    return cards
