from collections import Counter

from packages.engine import Hand
from packages.hands import CONSONANT_POOL, VOWEL_COUNTS, VOWEL_POOL, HandGenerator, vowel_count


def _deal(seed, n):
    gen = HandGenerator(seed=seed)
    return [gen.generate() for _ in range(n)]


def test_pools_match_frequency_tables():
    assert len(VOWEL_POOL) == 41 and Counter(VOWEL_POOL)["e"] == 12
    assert len(CONSONANT_POOL) == 69 and Counter(CONSONANT_POOL)["t"] == 9
    assert not set(VOWEL_POOL) & set(CONSONANT_POOL)
    assert sorted(set(VOWEL_COUNTS)) == [2, 3, 4, 5]

def test_every_hand_has_ten_letters_and_bounded_vowels():
    for hand in _deal(seed=1, n=500):
        assert isinstance(hand, Hand)
        assert len(hand.letters) == 10 and hand.letters.isalpha() and hand.letters.islower()
        assert 2 <= vowel_count(hand) <= 5

def test_same_seed_same_hands():
    assert _deal(seed=42, n=20) == _deal(seed=42, n=20)
    assert _deal(seed=42, n=20) != _deal(seed=43, n=20)

def test_reseed_restarts_sequence():
    gen = HandGenerator(seed=9)
    first = gen.generate()
    gen.generate()
    gen.reseed(9)
    assert gen.generate() == first

def test_tiles_drawn_without_replacement():
    pool_counts = Counter(VOWEL_POOL + CONSONANT_POOL)
    for hand in _deal(seed=3, n=2000):
        for ch, n in Counter(hand.letters).items():
            assert n <= pool_counts[ch]

def test_all_vowel_counts_occur():
    seen = Counter(vowel_count(h) for h in _deal(seed=5, n=2000))
    assert set(seen) == {2, 3, 4, 5}
    assert seen[3] > seen[5]  # 3 is listed three times, 5 once

def test_shuffle_hides_vowel_split():
    hands = _deal(seed=11, n=300)
    leading_vowels = sum(1 for h in hands if h.letters[0] in set(VOWEL_POOL))
    assert 0 < leading_vowels < len(hands)
