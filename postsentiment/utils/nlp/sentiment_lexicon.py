"""
Weighted English sentiment lexicon.

Positive weights lie in (0, 2], negative weights in [-2, 0). Intensifiers
scale the next sentiment word; negation triggers flip and dampen the words
that follow them. All tables are read-only views built once at import.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping


_POSITIVE = {
    # strong
    "amazing": 2.0, "awesome": 2.0, "excellent": 2.0, "outstanding": 2.0, "fantastic": 2.0,
    "brilliant": 2.0, "incredible": 2.0, "wonderful": 2.0, "magnificent": 2.0, "superb": 2.0,
    "exceptional": 2.0, "extraordinary": 2.0, "phenomenal": 2.0, "spectacular": 2.0,
    # moderate
    "great": 1.5, "good": 1.5, "nice": 1.5, "beautiful": 1.5, "lovely": 1.5,
    "impressive": 1.5, "perfect": 1.5, "pleased": 1.5, "satisfied": 1.5, "delighted": 1.5,
    "thrilled": 1.5, "excited": 1.5, "happy": 1.5, "joyful": 1.5, "grateful": 1.5,
    # mild
    "like": 1.0, "enjoy": 1.0, "appreciate": 1.0, "useful": 1.0, "helpful": 1.0,
    "better": 1.0, "improved": 1.0, "positive": 1.0, "optimistic": 1.0, "glad": 1.0,
    "thanks": 1.0, "thank": 1.0, "cool": 1.0, "fun": 1.0, "interesting": 1.0,
    # emotions
    "love": 2.0, "adore": 1.8, "cherish": 1.6, "admire": 1.4, "respect": 1.2,
    "celebrate": 1.6, "recommend": 1.4, "endorse": 1.3, "support": 1.2,
}

_NEGATIVE = {
    # strong
    "terrible": -2.0, "awful": -2.0, "horrible": -2.0, "disgusting": -2.0, "pathetic": -2.0,
    "catastrophic": -2.0, "disastrous": -2.0, "abysmal": -2.0, "appalling": -2.0, "atrocious": -2.0,
    "devastating": -2.0, "deplorable": -2.0, "despicable": -2.0, "dreadful": -2.0,
    # moderate
    "bad": -1.5, "poor": -1.5, "disappointing": -1.5, "frustrating": -1.5, "annoying": -1.5,
    "unacceptable": -1.5, "inadequate": -1.5, "unsatisfactory": -1.5, "problematic": -1.5,
    "concerning": -1.5, "troubling": -1.5, "disturbing": -1.5, "upset": -1.5, "angry": -1.5,
    # mild
    "dislike": -1.0, "disagree": -1.0, "unfortunate": -1.0, "issues": -1.0, "problems": -1.0,
    "concerned": -1.0, "worried": -1.0, "confused": -1.0, "unclear": -1.0, "difficult": -1.0,
    "wrong": -1.0, "error": -1.0, "failed": -1.0, "broken": -1.0, "slow": -1.0,
    # emotions
    "hate": -2.0, "detest": -1.8, "loathe": -1.8, "despise": -1.6, "regret": -1.4,
    "disappointed": -1.6, "frustrated": -1.5, "irritated": -1.3, "annoyed": -1.2, "bothered": -1.1,
}

# Multi-word keys never match a single token.
_INTENSIFIERS = {
    "very": 1.5, "extremely": 2.0, "incredibly": 2.0, "absolutely": 1.8, "totally": 1.6,
    "completely": 1.7, "utterly": 1.9, "highly": 1.4, "really": 1.3, "quite": 1.2,
    "so": 1.3, "too": 1.2, "super": 1.5, "ultra": 1.6, "mega": 1.5,
    "somewhat": 0.8, "slightly": 0.7, "a bit": 0.6, "kinda": 0.8, "sort of": 0.7,
}

_NEGATIONS = frozenset({
    "not", "no", "never", "nothing", "nobody", "nowhere", "neither", "nor",
    "cannot", "can't", "couldn't", "wouldn't", "shouldn't", "don't", "doesn't",
    "didn't", "won't", "isn't", "aren't", "wasn't", "weren't", "haven't", "hasn't",
})


@dataclass(frozen=True)
class Lexicon:
    """Read-only bundle of the four lookup tables."""

    positive: Mapping[str, float]
    negative: Mapping[str, float]
    intensifiers: Mapping[str, float]
    negations: FrozenSet[str]

    def word_weight(self, word: str) -> float:
        """Signed base weight of ``word``; 0.0 when it carries no sentiment."""
        return self.positive.get(word) or self.negative.get(word) or 0.0

    def intensifier_multiplier(self, word: str) -> float:
        return self.intensifiers.get(word, 1.0)

    def is_intensifier(self, word: str) -> bool:
        return self.intensifier_multiplier(word) != 1.0

    def is_negation(self, word: str) -> bool:
        return word in self.negations


def _build_lexicon() -> Lexicon:
    overlap = set(_POSITIVE) & set(_NEGATIVE)
    if overlap:
        raise ValueError(f"words listed as both positive and negative: {sorted(overlap)}")
    return Lexicon(
        positive=MappingProxyType(dict(_POSITIVE)),
        negative=MappingProxyType(dict(_NEGATIVE)),
        intensifiers=MappingProxyType(dict(_INTENSIFIERS)),
        negations=_NEGATIONS,
    )


LEXICON = _build_lexicon()
