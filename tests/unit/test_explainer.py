"""
Tests for the analysis explanation text.
"""
from postsentiment.utils.nlp import explain, explain_tokens


def test_empty_text():
    assert explain("") == "Analyzed 0 words. "


def test_no_lexicon_matches():
    assert explain("Heading to the office") == "Analyzed 4 words. "


def test_lists_sentiment_words_in_order():
    assert explain("I love this but hate that") == (
        "Analyzed 6 words. Found 2 sentiment words: love, hate. "
    )


def test_lists_at_most_five_words():
    assert explain("good great nice bad awful love") == (
        "Analyzed 6 words. Found 6 sentiment words: good, great, nice, bad, awful.... "
    )


def test_intensifiers_and_negations_counted():
    assert explain("Not very good") == (
        "Analyzed 3 words. Found 1 sentiment words: good. "
        "Detected 1 intensifiers. "
        "Found 1 negations affecting sentiment. "
    )


def test_repeated_words_counted_each_time():
    assert explain_tokens(["good", "good"]) == (
        "Analyzed 2 words. Found 2 sentiment words: good, good. "
    )
