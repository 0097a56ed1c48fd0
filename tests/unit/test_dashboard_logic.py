"""
Tests for dashboard helper logic (no Streamlit runtime needed).
"""
from postsentiment.dashboard.logic import (
    HISTORY_KEY,
    build_stat_cards,
    completion_message,
    get_history,
    submit_post,
    validate_post_text,
)


def test_validate_post_text_rejects_blank():
    assert validate_post_text("") == ["Please enter some text to analyze."]
    assert validate_post_text("   \n") == ["Please enter some text to analyze."]
    assert validate_post_text(None) == ["Please enter some text to analyze."]


def test_validate_post_text_length_limit():
    assert validate_post_text("x" * 280) == []
    assert validate_post_text("x" * 281) == ["Post is 281 characters; the limit is 280."]
    assert validate_post_text("hello", max_chars=3) == ["Post is 5 characters; the limit is 3."]


def test_get_history_reuses_state():
    state = {}
    history = get_history(state, max_entries=5)
    assert state[HISTORY_KEY] is history
    assert get_history(state, max_entries=5) is history


def test_get_history_resized_keeps_newest():
    state = {}
    history = get_history(state, max_entries=5)
    for text in ("one", "two", "three"):
        submit_post(history, text)

    resized = get_history(state, max_entries=2)
    assert resized is not history
    assert resized.max_entries == 2
    assert [e.text for e in resized] == ["three", "two"]


def test_submit_post_prepends_entry():
    state = {}
    history = get_history(state)
    entry = submit_post(history, "not good")
    assert history.entries[0] is entry
    assert entry.result.sentiment == "negative"
    assert entry.explanation.startswith("Analyzed 2 words.")


def test_completion_message():
    history = get_history({})
    entry = submit_post(history, "not good")
    assert completion_message(entry) == "Analysis complete: negative sentiment (Medium confidence)!"


def test_build_stat_cards(sample_records):
    cards = build_stat_cards(sample_records)
    assert [c["title"] for c in cards] == [
        "Positive Sentiment",
        "Negative Sentiment",
        "Neutral Sentiment",
        "Average Confidence",
    ]
    assert cards[0]["value"] == "2"
    assert cards[0]["detail"] == "33.3% of total"
    assert cards[1]["value"] == "3"
    assert cards[3]["value"].endswith("%")


def test_build_stat_cards_empty():
    assert build_stat_cards([]) == []
