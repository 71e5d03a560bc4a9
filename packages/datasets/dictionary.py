"""
Dictionary loader.

Reads a newline-delimited word list and normalizes every line the same way
hands and answers are normalized (lowercase, a–z only). Lines that end up
empty are dropped; order and duplicates are kept.

The result is a tuple: it is shared by every feasibility build and must never
change after load.

DICTIONARY_CACHE_KEY carries a version suffix. Bump it whenever normalization
changes so a cache filled under the old rules is never read back.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Tuple

from packages.engine.letters import normalize_word
from .io import read_lines

logger = logging.getLogger(__name__)

DICTIONARY_CACHE_KEY = "dictionary/normalized_words_v2"
DICTIONARY_TTL_SEC = 7 * 24 * 60 * 60

DEFAULT_DICTIONARY_PATH = Path(__file__).parent / "data" / "words.txt"

Dictionary = Tuple[str, ...]


def normalize_lines(lines: Iterable[str]) -> Dictionary:
    return tuple(w for w in (normalize_word(ln) for ln in lines) if w)


def load_dictionary(path: Path | str = DEFAULT_DICTIONARY_PATH) -> Dictionary:
    """
    Load and normalize a word list. Raises MissingResource if `path` is absent.
    """
    words = normalize_lines(read_lines(path))
    logger.info("Loaded %d words from %s", len(words), path)
    return words
