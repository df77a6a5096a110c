"""
Adjacency rule for the word graph.

Two words are adjacent when one can be turned into the other by a single
character edit:

    CAT -> HAT     substitution
    AT  -> CAT     insertion
    CAT -> AT      deletion

A word is never adjacent to itself and the comparison ignores case.
"""

from typing import Optional

from .errors import InvalidArgument


def canonicalize(word: Optional[str]) -> str:
    """Trim and uppercase a word, rejecting absent or blank input."""
    if word is None:
        raise InvalidArgument("word must not be None")
    canonical = word.strip().upper()
    if not canonical:
        raise InvalidArgument(f"word {word!r} is empty")
    return canonical


def _one_substitution(word1: str, word2: str) -> bool:
    mismatches = 0
    for c1, c2 in zip(word1, word2):
        if c1 != c2:
            mismatches += 1
            if mismatches > 1:
                return False
    return mismatches == 1


def _one_insertion(longer: str, shorter: str) -> bool:
    # skip the first mismatching position of the longer word, the rest must line up
    i = 0
    while i < len(shorter) and longer[i] == shorter[i]:
        i += 1
    return longer[i + 1 :] == shorter[i:]


def is_adjacent(word1: Optional[str], word2: Optional[str]) -> bool:
    return _is_adjacent_canonical(canonicalize(word1), canonicalize(word2))


def _is_adjacent_canonical(word1: str, word2: str) -> bool:
    """Adjacency of two words that are already trimmed and uppercased."""
    if word1 == word2:
        return False
    if abs(len(word1) - len(word2)) > 1:
        return False

    if len(word1) == len(word2):
        return _one_substitution(word1, word2)
    if len(word1) > len(word2):
        return _one_insertion(word1, word2)
    return _one_insertion(word2, word1)
