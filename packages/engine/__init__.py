from .errors import InvalidHand, LetterGridError, MissingResource
from .letters import HAND_SIZE, Hand, can_form, letter_counts, normalize_word
from .feasibility import FeasibilityIndex
from .multiplier import DEFAULT_CONFIG, MultiplierConfig, calculate
from .scoring import RoundResult, answer_in_letters, quickness_multiplier, score_round

__all__ = [
    "HAND_SIZE", "Hand", "FeasibilityIndex", "MultiplierConfig", "DEFAULT_CONFIG",
    "RoundResult", "InvalidHand", "MissingResource", "LetterGridError",
    "calculate", "score_round", "quickness_multiplier", "answer_in_letters",
    "normalize_word", "letter_counts", "can_form",
]
