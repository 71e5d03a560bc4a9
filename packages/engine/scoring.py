"""
Round scoring: turn a player's answer and elapsed time into points.

Checks run in order and the first failure ends the round with zero points:
  1) every answer letter must come from the hand (each hand tile used once)
  2) the answer must be a feasible dictionary word for this hand

On success:
  time      = max(elapsed, 1)
  quickness = round(5.0 ** (1 - time / 30), 2)   # 4.74x at 1s, 1.0x at 30s
  score     = round(len(answer)**2 * quickness * round(multiplier, 2), 2)

Quickness keeps decaying past 30 seconds; it is not clamped.

Examples:
  quickness_multiplier(1)  -> 4.74
  quickness_multiplier(30) -> 1.0
  quickness_multiplier(60) -> 0.2
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

from .feasibility import FeasibilityIndex
from .letters import Hand, as_hand

MSG_NOT_IN_GRID = "Your word uses characters not in the grid."
MSG_NOT_A_WORD = "Your word is not an English word."
MSG_SUCCESS = "Well done!"

QUICKNESS_BASE = 5.0
QUICKNESS_WINDOW_SEC = 30.0


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one submission; a rejected answer is a result, not an error."""
    answer: str
    elapsed_seconds: float
    score: float
    message: str
    success: bool
    quickness_multiplier: float = 0.0
    score_multiplier: float = 0.0

    def to_dict(self) -> Dict:
        return asdict(self)


def quickness_multiplier(elapsed_seconds: float) -> float:
    """Time-decay factor, floored at 1 second of elapsed time."""
    t = max(float(elapsed_seconds), 1.0)
    return round(QUICKNESS_BASE ** (1.0 - t / QUICKNESS_WINDOW_SEC), 2)


def answer_in_letters(answer: str, hand: Hand | str) -> bool:
    """
    True if the answer can be laid out from this hand's tiles, using each
    tile at most once ('tot' needs two t tiles).
    """
    remaining = as_hand(hand).counts()
    for ch in answer:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1
    return True


def score_round(answer: str, hand: Hand | str, elapsed_seconds: float,
                index: FeasibilityIndex) -> RoundResult:
    """Validate and score one answer against a hand and its feasibility index."""
    hand = as_hand(hand)
    clean = str(answer).strip().lower()

    if not answer_in_letters(clean, hand):
        return RoundResult(clean, elapsed_seconds, 0, MSG_NOT_IN_GRID, False)

    if not index.valid(clean):
        return RoundResult(clean, elapsed_seconds, 0, MSG_NOT_A_WORD, False)

    quickness = quickness_multiplier(elapsed_seconds)
    multiplier = round(index.score_multiplier, 2)
    score = round((len(clean) ** 2) * quickness * multiplier, 2)
    return RoundResult(clean, elapsed_seconds, score, MSG_SUCCESS, True,
                       quickness_multiplier=quickness, score_multiplier=multiplier)
