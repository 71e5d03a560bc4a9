"""
Difficulty score multiplier for a hand.

Two signals describe how hard a hand is:
  - word_count      : how many feasible words exist
  - score_potential : mean of len(w)**2 over those words (the round score is
                      length-squared based, so this tracks the achievable ceiling)

Each is mapped to [0, 1] on a log scale between configured bounds
(1.0 = at/below the hard bound, 0.0 = at/above the easy bound), blended by
weights, and used to interpolate between min_multiplier (easy hands) and
max_multiplier (hard hands).

Log scaling compresses the wide word-count range: going from 20 to 40 words
moves the needle far more than going from 1000 to 1020.

Example (default config):
    calculate([])                     -> 1.0   (base multiplier)
    calculate(["cat", "act", ...20 words]) -> 2.8   (few, short words: hardest)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class MultiplierConfig:
    """All bounds and weights; retune here without touching the algorithm."""
    base_multiplier: float = 1.0
    min_multiplier: float = 0.5
    max_multiplier: float = 2.8
    word_count_bounds: Tuple[float, float] = (20.0, 1500.0)
    score_potential_bounds: Tuple[float, float] = (12.0, 40.0)
    word_count_weight: float = 0.5
    score_potential_weight: float = 0.5

    def __post_init__(self):
        for name in ("word_count_bounds", "score_potential_bounds"):
            lo, hi = getattr(self, name)
            if lo <= 0 or hi <= lo:
                raise ValueError(f"{name} must satisfy 0 < min < max; got {(lo, hi)}")
        if self.max_multiplier < self.min_multiplier:
            raise ValueError("max_multiplier must be >= min_multiplier")

    @classmethod
    def from_env(cls) -> "MultiplierConfig":
        """Read LETTERGRID_* overrides; unset variables keep the defaults."""
        d = cls()

        def _f(name: str, default: float) -> float:
            return float(os.environ.get(f"LETTERGRID_{name}", default))

        return cls(
            base_multiplier=_f("BASE_MULTIPLIER", d.base_multiplier),
            min_multiplier=_f("MIN_MULTIPLIER", d.min_multiplier),
            max_multiplier=_f("MAX_MULTIPLIER", d.max_multiplier),
            word_count_bounds=(
                _f("WORD_COUNT_MIN", d.word_count_bounds[0]),
                _f("WORD_COUNT_MAX", d.word_count_bounds[1]),
            ),
            score_potential_bounds=(
                _f("POTENTIAL_MIN", d.score_potential_bounds[0]),
                _f("POTENTIAL_MAX", d.score_potential_bounds[1]),
            ),
            word_count_weight=_f("WORD_COUNT_WEIGHT", d.word_count_weight),
            score_potential_weight=_f("POTENTIAL_WEIGHT", d.score_potential_weight),
        )


DEFAULT_CONFIG = MultiplierConfig()


def log_normalize(value: float, lo: float, hi: float) -> float:
    """
    Map value onto [0, 1] on a log scale: 1.0 at/below lo, 0.0 at/above hi.
    """
    v = float(np.clip(value, lo, hi))
    return float((np.log(hi) - np.log(v)) / (np.log(hi) - np.log(lo)))


def score_potential(words: Sequence[str]) -> float:
    """Mean of squared word lengths (0.0 for no words)."""
    if not words:
        return 0.0
    lengths = np.fromiter((len(w) for w in words), dtype=float, count=len(words))
    return float(np.mean(lengths ** 2))


def combined_difficulty(word_count: int, potential: float,
                        config: MultiplierConfig = DEFAULT_CONFIG) -> float:
    """Weighted blend of both normalized signals, clamped to [0, 1]."""
    n_count = log_normalize(word_count, *config.word_count_bounds)
    n_potential = log_normalize(potential, *config.score_potential_bounds)
    blended = (config.word_count_weight * n_count
               + config.score_potential_weight * n_potential)
    return float(np.clip(blended, 0.0, 1.0))


def calculate(words: Sequence[str], config: MultiplierConfig = DEFAULT_CONFIG) -> float:
    """
    Difficulty multiplier for a feasible-word universe.

    Returns config.base_multiplier for an empty universe (e.g. an
    all-consonant hand) so nothing divides by zero.
    """
    if not words:
        return config.base_multiplier

    difficulty = combined_difficulty(len(words), score_potential(words), config)
    span = config.max_multiplier - config.min_multiplier
    return config.min_multiplier + difficulty * span
