"""
Tests for the bounded session history.
"""
from datetime import datetime

import pytest

from postsentiment.utils.history import SessionHistory
from postsentiment.utils.nlp import analyze


def test_newest_entry_first():
    history = SessionHistory(max_entries=5)
    history.add("first", analyze("first"))
    history.add("second", analyze("second"))
    assert [e.text for e in history] == ["second", "first"]


def test_oldest_entries_dropped_at_capacity():
    history = SessionHistory(max_entries=3)
    for i in range(5):
        history.add(f"post {i}", analyze(f"post {i}"))
    assert len(history) == 3
    assert [e.text for e in history.entries] == ["post 4", "post 3", "post 2"]


def test_to_records_flattens_result():
    history = SessionHistory()
    ts = datetime(2024, 5, 1, 12, 30, 0)
    history.add("not good", analyze("not good"), "explained", timestamp=ts)
    record = history.to_records()[0]
    assert record["text"] == "not good"
    assert record["sentiment"] == "negative"
    assert record["negative_score"] == pytest.approx(1.0)
    assert record["word_count"] == 2
    assert record["explanation"] == "explained"
    assert record["timestamp"] == "2024-05-01T12:30:00"


def test_results_and_clear():
    history = SessionHistory()
    history.add("good", analyze("good"))
    assert [r.sentiment for r in history.results] == ["positive"]
    history.clear()
    assert len(history) == 0


def test_invalid_max_entries():
    with pytest.raises(ValueError):
        SessionHistory(max_entries=0)
