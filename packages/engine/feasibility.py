"""
Word feasibility index for a single hand.

Given 10 letters and the shared dictionary, keep exactly the words that can be
spelled from the hand's letter multiset, then answer questions about them:

    index = FeasibilityIndex.build("gardenpils", dictionary)
    index.valid("gardens")      # -> True
    index.valid("pizza")        # -> False
    index.longest()             # -> ("spangled", ...)
    index.longest_length()      # -> 8
    index.all()                 # -> every feasible word, longest first

Two ways in:
  - build(hand, dictionary)       : one linear scan + one sort (cache miss)
  - from_snapshot(hand, snapshot) : rehydrate a cached build without scanning

Both produce the same object, so callers never know which path ran.
The dictionary passed to build() is only read, never modified.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, FrozenSet, Iterable, Sequence, Tuple

from .letters import HAND_SIZE, Hand, as_hand, can_form, letter_counts, normalize_word
from .multiplier import DEFAULT_CONFIG, MultiplierConfig, calculate

logger = logging.getLogger(__name__)


def _longest_first(words: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted(words, key=lambda w: (-len(w), w)))


class FeasibilityIndex:
    """Immutable view of the words formable from one hand."""

    def __init__(self, hand: Hand, letter_counts: Dict[str, int],
                 sorted_words: Sequence[str], score_multiplier: float):
        self._hand = hand
        self._letter_counts = dict(letter_counts)
        self._sorted_words: Tuple[str, ...] = tuple(sorted_words)
        self._word_set: FrozenSet[str] = frozenset(self._sorted_words)
        self._score_multiplier = float(score_multiplier)

    # ---- construction ----

    @classmethod
    def build(cls, hand: Hand | str, dictionary: Iterable[str],
              config: MultiplierConfig = DEFAULT_CONFIG) -> "FeasibilityIndex":
        """
        Scan the dictionary once and keep every word whose letter multiset
        fits inside the hand's. Raises InvalidHand for a bad hand.
        """
        hand = as_hand(hand)
        available = hand.counts()

        found = {
            w for w in dictionary
            if len(w) <= HAND_SIZE and can_form(letter_counts(w), available)
        }
        sorted_words = _longest_first(found)
        multiplier = calculate(sorted_words, config)

        logger.debug("built index for %s: %d words, multiplier=%.3f",
                     hand.key, len(sorted_words), multiplier)
        return cls(hand, available, sorted_words, multiplier)

    @classmethod
    def from_snapshot(cls, hand: Hand | str, snapshot: Dict) -> "FeasibilityIndex":
        """
        Rehydrate from to_snapshot() output. No filtering, sorting or
        multiplier math happens here; the snapshot is trusted as-is.
        """
        return cls(
            as_hand(hand),
            snapshot["letter_counts"],
            snapshot["words"],
            snapshot["score_multiplier"],
        )

    def to_snapshot(self) -> Dict:
        """Plain, cache-friendly representation (lists/dicts/floats only)."""
        return {
            "words": list(self._sorted_words),
            "letter_counts": dict(self._letter_counts),
            "score_multiplier": self._score_multiplier,
        }

    # ---- queries ----

    def valid(self, word) -> bool:
        """True if the (normalized) word is one of the feasible words."""
        clean = normalize_word(word if word is not None else "")
        return bool(clean) and clean in self._word_set

    def all(self) -> Tuple[str, ...]:
        """Every feasible word, longest first, ties alphabetical."""
        return self._sorted_words

    def longest(self) -> Tuple[str, ...]:
        """All words sharing the maximum length (may be several, or none)."""
        top = self.longest_length()
        out = []
        for w in self._sorted_words:
            if len(w) != top:
                break
            out.append(w)
        return tuple(out)

    def longest_length(self) -> int:
        return len(self._sorted_words[0]) if self._sorted_words else 0

    def total_count(self) -> int:
        return len(self._word_set)

    @property
    def hand(self) -> Hand:
        return self._hand

    @property
    def letter_counts(self) -> Counter[str]:
        return Counter(self._letter_counts)

    @property
    def score_multiplier(self) -> float:
        return self._score_multiplier

    def __contains__(self, word) -> bool:
        return self.valid(word)

    def __len__(self) -> int:
        return self.total_count()

    def __repr__(self) -> str:
        return (f"FeasibilityIndex(hand={self._hand.letters!r}, "
                f"words={self.total_count()}, multiplier={self._score_multiplier:.2f})")
