"""
Dictionary loading.

A dictionary is a text file with one word per line. Lines are trimmed,
blank lines dropped and words uppercased before they reach the graph.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .config import DICTIONARY_ENCODING
from .errors import SourceUnavailable


def clean_lines(lines: Iterable[Optional[str]]) -> Iterator[str]:
    for line in lines:
        if line is None:
            continue
        word = line.strip()
        if word:
            yield word.upper()


def normalize_words(lines: Iterable[Optional[str]]) -> List[str]:
    """Clean the lines and drop repeats, keeping the first occurrence."""
    seen = set()
    words = []
    for word in clean_lines(lines):
        if word not in seen:
            seen.add(word)
            words.append(word)
    return words


def get_word_stream(filepath: Union[str, Path, None]) -> Iterator[str]:
    """
    Yield the cleaned words of a dictionary file, repeats included.

    Raises:
        SourceUnavailable: the path is None, missing, unreadable or not
            valid text in DICTIONARY_ENCODING.
    """
    if filepath is None:
        raise SourceUnavailable("no dictionary path given")
    try:
        with open(filepath, "r", encoding=DICTIONARY_ENCODING) as fi:
            yield from clean_lines(fi)
    except (OSError, UnicodeDecodeError) as err:
        raise SourceUnavailable(f"cannot read dictionary {filepath}: {err}") from err


def load_words(filepath: Union[str, Path, None]) -> List[str]:
    return normalize_words(get_word_stream(filepath))
