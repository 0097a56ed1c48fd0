"""
Tests for the text-level entry points.
"""
import pytest

from postsentiment.utils.nlp import analyze, analyze_batch, confidence_level


@pytest.mark.parametrize("confidence, label", [
    (0.98, "Very High"),
    (0.95, "Very High"),
    (0.9, "Very High"),
    (0.85, "High"),
    (0.8, "High"),
    (0.75, "Medium"),
    (0.7, "Medium"),
    (0.65, "Low"),
    (0.6, "Low"),
    (0.5, "Very Low"),
    (0.3, "Very Low"),
])
def test_confidence_level(confidence, label):
    assert confidence_level(confidence) == label


def test_analyze_batch_preserves_order():
    texts = ["I love it", "I hate it", "It is a chair", ""]
    results = analyze_batch(texts)
    assert [r.sentiment for r in results] == ["positive", "negative", "neutral", "neutral"]
    assert results == [analyze(t) for t in texts]


def test_analyze_batch_empty():
    assert analyze_batch([]) == []
