"""
Game facade: the whole surface a web/controller layer needs.

    game = WordGame(Settings(dictionary_path="words.txt"))
    hand = game.generate_hand()
    index = game.get_or_build_index(hand)       # warm it when the round starts
    result = game.score_round("garden", hand, elapsed_seconds=7)

The cache is passed in, not looked up globally, so tests can hand over a
MemoryCache with a fake clock. Two entries live in it:
  - the normalized dictionary (one key, long TTL)
  - one snapshot per hand, keyed by its sorted letters (short TTL)

Everything here is pure computation over read-only data; the dictionary file
is read only when its cache entry is (re)populated.
"""

from __future__ import annotations

import logging
from typing import Iterable

from packages.cache import CacheStore, MemoryCache
from packages.datasets.dictionary import DICTIONARY_CACHE_KEY, Dictionary, load_dictionary
from packages.engine.feasibility import FeasibilityIndex
from packages.engine.letters import Hand, as_hand
from packages.engine.scoring import RoundResult, score_round
from packages.hands import HandGenerator
from .config import INDEX_CACHE_PREFIX, Settings

logger = logging.getLogger(__name__)


def index_cache_key(hand: Hand) -> str:
    return INDEX_CACHE_PREFIX + hand.key


class WordGame:
    def __init__(self, settings: Settings | None = None, *,
                 cache: CacheStore | None = None,
                 generator: HandGenerator | None = None,
                 seed: int | None = None):
        self.settings = settings or Settings()
        self.cache = cache if cache is not None else MemoryCache()
        self.generator = generator or HandGenerator(seed=seed)

    def warm(self) -> Dictionary:
        """
        Load the dictionary into the cache at startup. A missing file raises
        MissingResource here instead of surfacing on the first request.
        """
        return self.dictionary()

    def dictionary(self) -> Dictionary:
        return self.cache.fetch(
            DICTIONARY_CACHE_KEY,
            self.settings.dictionary_ttl,
            lambda: load_dictionary(self.settings.dictionary_path),
        )

    def generate_hand(self) -> Hand:
        return self.generator.generate()

    def get_or_build_index(self, hand: Hand | str | Iterable[str]) -> FeasibilityIndex:
        """
        Cached index for this hand (any permutation shares the entry).
        Raises InvalidHand before touching the cache.
        """
        hand = as_hand(hand)
        key = index_cache_key(hand)

        cached = self.cache.read(key)
        if cached is not None:
            logger.debug("hydrating index %s from cache", key)
            return FeasibilityIndex.from_snapshot(hand, cached)

        built = []

        def _build():
            index = FeasibilityIndex.build(hand, self.dictionary(), self.settings.multiplier)
            built.append(index)
            return index.to_snapshot()

        snapshot = self.cache.fetch(key, self.settings.index_ttl, _build)
        if built:
            logger.info("built index for %s (%d words)", hand.key, built[0].total_count())
            return built[0]
        return FeasibilityIndex.from_snapshot(hand, snapshot)

    def score_round(self, answer: str, hand: Hand | str | Iterable[str],
                    elapsed_seconds: float) -> RoundResult:
        hand = as_hand(hand)
        result = score_round(answer, hand, elapsed_seconds, self.get_or_build_index(hand))
        logger.debug("scored %r on %s: %s", result.answer, hand.letters, result.score)
        return result
