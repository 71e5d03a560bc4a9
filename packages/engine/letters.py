"""
Letter hands and letter multisets.

A hand is 10 lowercase a–z letters. Input is normalized the same way as
dictionary words (lowercase, drop anything outside a–z) and must come out at
exactly HAND_SIZE letters; anything else is an InvalidHand, never a silent
truncation.

Feasibility is a multiset test, not a set test: 'letter' needs two e's and
two t's, so a hand with a single 't' cannot make it.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping

from .errors import InvalidHand

HAND_SIZE = 10

_NON_ALPHA = re.compile(r"[^a-z]")


def normalize_word(text) -> str:
    """Lowercase and strip every character outside a–z ('Don't!' -> 'dont')."""
    return _NON_ALPHA.sub("", str(text).lower())


def letter_counts(word: str) -> Counter[str]:
    return Counter(word)


def can_form(needed: Mapping[str, int], available: Mapping[str, int]) -> bool:
    """
    True if every letter in `needed` is available at least as many times.
    Repeated letters are honored on both sides.
    """
    return all(available.get(ch, 0) >= n for ch, n in needed.items())


@dataclass(frozen=True)
class Hand:
    """
    Ten letters dealt for one round, kept in deal order.
    Input is normalized on construction: Hand("GARDENPILS").letters == "gardenpils".
    """
    letters: str

    def __post_init__(self):
        object.__setattr__(self, "letters", normalize_word(self.letters))
        if len(self.letters) != HAND_SIZE:
            raise InvalidHand(
                f"Exactly {HAND_SIZE} letters required; got {self.letters!r}"
            )

    @classmethod
    def parse(cls, raw: str | Iterable[str]) -> "Hand":
        """
        Build a hand from a string ('GARDENPILS', 'g a r d ...') or a
        sequence of single letters (['G', 'A', ...]).
        """
        return cls(raw if isinstance(raw, str) else "".join(raw))

    @property
    def key(self) -> str:
        """Letters sorted; permutations of a hand share this key."""
        return "".join(sorted(self.letters))

    def counts(self) -> Counter[str]:
        return letter_counts(self.letters)

    def __iter__(self):
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __str__(self) -> str:
        return " ".join(self.letters.upper())


def as_hand(hand: Hand | str | Iterable[str]) -> Hand:
    return hand if isinstance(hand, Hand) else Hand.parse(hand)
