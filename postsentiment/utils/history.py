"""
Session history of analysed posts (most recent first, bounded).
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Deque, Dict, Iterator, List, Optional

from postsentiment.utils.nlp.result import AnalysisResult


DEFAULT_MAX_ENTRIES = 20


@dataclass(frozen=True)
class HistoryEntry:
    text: str
    result: AnalysisResult
    explanation: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def to_record(self) -> Dict[str, Any]:
        """Flatten into one dict row (for pandas / JSON)."""
        return {
            "text": self.text,
            "sentiment": self.result.sentiment,
            "confidence": self.result.confidence,
            "positive_score": self.result.scores.positive,
            "negative_score": self.result.scores.negative,
            "neutral_score": self.result.scores.neutral,
            "word_count": self.result.word_count,
            "normalized_score": self.result.normalized_score,
            "explanation": self.explanation,
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
        }


class SessionHistory:
    """Keeps the newest ``max_entries`` analyses; older ones fall off."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries <= 0:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries: Deque[HistoryEntry] = deque(maxlen=max_entries)

    def add(
        self,
        text: str,
        result: AnalysisResult,
        explanation: str = "",
        timestamp: Optional[datetime] = None,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            text=text,
            result=result,
            explanation=explanation,
            timestamp=timestamp or datetime.now(),
        )
        self._entries.appendleft(entry)
        return entry

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    @property
    def results(self) -> List[AnalysisResult]:
        return [e.result for e in self._entries]

    def to_records(self) -> List[Dict[str, Any]]:
        return [e.to_record() for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(list(self._entries))
