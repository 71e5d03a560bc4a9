import pytest
from packages.engine import FeasibilityIndex, Hand, InvalidHand, can_form, letter_counts, normalize_word

DICTIONARY = (
    "garden", "gardens", "danger", "grade", "plead", "spangled", "earn",
    "pizza", "sass", "deed", "letter", "a",
)

# --- normalization + hands ---
@pytest.mark.parametrize("raw,expected", [
    ("Garden", "garden"),
    ("don't", "dont"),
    ("E-Mail ", "email"),
    ("123", ""),
    ("", ""),
])
def test_normalize_word(raw, expected):
    assert normalize_word(raw) == expected

def test_hand_parse_variants():
    assert Hand.parse("GARDENPILS").letters == "gardenpils"
    assert Hand.parse("g a r d e n p i l s").letters == "gardenpils"
    assert Hand.parse(list("GARDENPILS")).letters == "gardenpils"
    assert Hand.parse("gardenpils").key == "adegilnprs"

@pytest.mark.parametrize("raw", ["short", "gardenpilsx", "gardenpil5", "", "1234567890"])
def test_hand_wrong_length_is_invalid(raw):
    with pytest.raises(InvalidHand):
        Hand.parse(raw)

def test_invalid_hand_is_a_value_error():
    with pytest.raises(ValueError):
        Hand("Garden")

def test_constructor_normalizes_case_and_symbols():
    assert Hand("GARDENPILS").letters == "gardenpils"
    assert Hand("G-A-R-D-E-N-P-I-L-S") == Hand("gardenpils")

def test_can_form_honors_repeats():
    hand = letter_counts("letterxyzq")
    assert can_form(letter_counts("letter"), hand) is True
    assert can_form(letter_counts("lettter"), hand) is False
    assert can_form(letter_counts("tel"), letter_counts("tl")) is False

# --- feasibility index ---
def test_build_keeps_only_formable_words():
    index = FeasibilityIndex.build("gardenpils", DICTIONARY)
    assert index.all() == ("spangled", "gardens", "danger", "garden", "grade", "plead", "earn", "a")
    assert index.total_count() == 8
    for w in ("pizza", "sass", "deed", "letter"):
        assert index.valid(w) is False

def test_build_does_not_mutate_dictionary():
    words = list(DICTIONARY)
    FeasibilityIndex.build("gardenpils", words)
    assert words == list(DICTIONARY)

def test_duplicate_dictionary_entries_collapse():
    index = FeasibilityIndex.build("gardenpils", ["earn", "earn", "garden"])
    assert index.all() == ("garden", "earn")
    assert index.total_count() == 2

@pytest.mark.parametrize("query,expected", [
    ("garden", True),
    ("GARDEN", True),
    ("  gardens ", True),
    ("gar-den", True),
    ("", False),
    ("123", False),
    (None, False),
    ("pizza", False),
])
def test_valid_normalizes_query(query, expected):
    index = FeasibilityIndex.build("gardenpils", DICTIONARY)
    assert index.valid(query) is expected

def test_longest_and_ties():
    index = FeasibilityIndex.build("gardenpils", ["earn", "garden", "danger"])
    assert index.longest() == ("danger", "garden")
    assert index.longest_length() == 6

def test_permutations_share_results():
    a = FeasibilityIndex.build("gardenpils", DICTIONARY)
    b = FeasibilityIndex.build("slipnedrag", DICTIONARY)
    assert a.all() == b.all()
    assert a.hand.key == b.hand.key
    assert a.score_multiplier == b.score_multiplier

def test_build_rejects_bad_hand():
    with pytest.raises(InvalidHand):
        FeasibilityIndex.build("garden", DICTIONARY)

def test_no_vowel_hand_is_empty_not_an_error():
    index = FeasibilityIndex.build("bcdfghjklm", DICTIONARY)
    assert index.all() == ()
    assert index.longest() == ()
    assert index.longest_length() == 0
    assert index.total_count() == 0
    assert index.score_multiplier == 1.0

def test_snapshot_round_trip_restores_everything():
    built = FeasibilityIndex.build("gardenpils", DICTIONARY)
    restored = FeasibilityIndex.from_snapshot("gardenpils", built.to_snapshot())
    assert restored.all() == built.all()
    assert restored.letter_counts == built.letter_counts
    assert restored.score_multiplier == built.score_multiplier
    assert restored.valid("spangled")

def test_from_snapshot_trusts_snapshot_without_recomputing():
    snap = {"words": ["zzz"], "letter_counts": {"z": 3}, "score_multiplier": 9.99}
    index = FeasibilityIndex.from_snapshot("gardenpils", snap)
    assert index.all() == ("zzz",)
    assert index.score_multiplier == 9.99
    assert index.letter_counts["z"] == 3
    assert "zzz" in index and len(index) == 1
