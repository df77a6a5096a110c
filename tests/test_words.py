import pytest

from word_ladder import InvalidArgument, canonicalize, is_adjacent
from word_ladder.words import _is_adjacent_canonical


@pytest.mark.parametrize(
    "word1,word2",
    [
        ("cat", "bat"),
        ("cat", "cot"),
        ("cat", "cab"),
        ("at", "cat"),
        ("cat", "at"),
        ("cat", "cart"),
        ("cat", "cats"),
        ("hate", "hater"),
        ("a", "b"),
        ("a", "an"),
    ],
)
def test_single_edit_is_adjacent(word1, word2):
    assert is_adjacent(word1, word2)
    assert is_adjacent(word2, word1)


@pytest.mark.parametrize(
    "word1,word2",
    [
        ("cat", "dog"),
        ("cat", "cat"),
        ("cat", "act"),
        ("cat", "c"),
        ("cat", "coats"),
        ("cart", "cat_"),
        ("apple", "octopus"),
        ("abc", "bcd"),
        ("ab", "bca"),
    ],
)
def test_not_adjacent(word1, word2):
    assert not is_adjacent(word1, word2)
    assert not is_adjacent(word2, word1)


def test_comparison_ignores_case():
    assert is_adjacent("CAT", "hat")
    assert not is_adjacent("Cat", "cAT")


@pytest.mark.parametrize("word1,word2", [(None, "cat"), ("cat", None), ("", "cat"), ("cat", "  ")])
def test_absent_word_raises(word1, word2):
    with pytest.raises(InvalidArgument):
        is_adjacent(word1, word2)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        is_adjacent(None, None)


def test_canonicalize_trims_and_uppercases():
    assert canonicalize("  hater\n") == "HATER"


@pytest.mark.parametrize("word1,word2", [("CAT", "HAT"), ("AT", "CAT"), ("CAT", "DOG"), ("CAT", "CAT")])
def test_canonical_helper_agrees_with_public_check(word1, word2):
    assert _is_adjacent_canonical(word1, word2) == is_adjacent(word1.lower(), word2)
