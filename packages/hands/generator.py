"""
Letter hand generator.

Deals a 10-letter hand from two frequency-weighted pools:
  - pick a vowel count from VOWEL_COUNTS (repeats skew toward 3-4 vowels)
  - draw that many tiles from the vowel pool, the rest from the consonant pool
  - shuffle so the vowel/consonant split can't be read from tile order

Each pool repeats a letter roughly in proportion to its frequency in English
text, and tiles are drawn without replacement, so a hand can hold at most
as many E's as the pool has E tiles.

Deterministic across runs with the same seed.
"""

from __future__ import annotations

import random
from typing import Tuple

from packages.engine.letters import HAND_SIZE, Hand


def _pool(weights: dict) -> Tuple[str, ...]:
    return tuple(ch for ch, n in weights.items() for _ in range(n))


VOWEL_POOL: Tuple[str, ...] = _pool({"a": 8, "e": 12, "i": 8, "o": 7, "u": 4, "y": 2})

CONSONANT_POOL: Tuple[str, ...] = _pool({
    "b": 2, "c": 4, "d": 5, "f": 2, "g": 2,
    "h": 6, "j": 1, "k": 1, "l": 5, "m": 3,
    "n": 7, "p": 2, "q": 1, "r": 6, "s": 7,
    "t": 9, "v": 1, "w": 3, "x": 1, "z": 1,
})

VOWEL_COUNTS: Tuple[int, ...] = (2, 3, 3, 3, 4, 4, 5)

VOWELS = frozenset(VOWEL_POOL)


class HandGenerator:
    """Seedable dealer; the only source of randomness in the engine."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self.rng = rng or random.Random(seed)

    def reseed(self, seed: int) -> None:
        self.rng.seed(seed)

    def generate(self) -> Hand:
        vowel_count = self.rng.choice(VOWEL_COUNTS)
        tiles = (self.rng.sample(VOWEL_POOL, vowel_count)
                 + self.rng.sample(CONSONANT_POOL, HAND_SIZE - vowel_count))
        self.rng.shuffle(tiles)
        return Hand("".join(tiles))


def vowel_count(hand: Hand) -> int:
    return sum(1 for ch in hand if ch in VOWELS)
