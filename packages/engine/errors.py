"""
Error taxonomy for the letter-grid engine.

Only construction/startup problems are exceptions. A bad player answer is a
normal outcome and is reported through RoundResult, never raised.
"""


class LetterGridError(Exception):
    """Base class for engine errors."""


class InvalidHand(LetterGridError, ValueError):
    """Hand does not hold exactly HAND_SIZE letters after normalization."""


class MissingResource(LetterGridError, FileNotFoundError):
    """A required resource (the dictionary file) is absent."""
