from .generator import CONSONANT_POOL, VOWEL_COUNTS, VOWEL_POOL, HandGenerator, vowel_count

__all__ = ["HandGenerator", "VOWEL_POOL", "CONSONANT_POOL", "VOWEL_COUNTS", "vowel_count"]
