import pytest

from word_ladder import SourceUnavailable
from word_ladder.dictionary import get_word_stream, load_words, normalize_words


def test_word_stream_trims_drops_blanks_and_uppercases(write_dictionary):
    path = write_dictionary(["  cat", "", "Hat  ", "   ", "cat"])
    assert list(get_word_stream(path)) == ["CAT", "HAT", "CAT"]


def test_load_words_keeps_first_occurrence(write_dictionary):
    path = write_dictionary(["hat", "cat", "HAT", "car", "Cat"])
    assert load_words(path) == ["HAT", "CAT", "CAR"]


def test_normalize_skips_none():
    assert normalize_words(["a", None, "b"]) == ["A", "B"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(SourceUnavailable) as excinfo:
        load_words(tmp_path / "nope.txt")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_none_path_raises():
    with pytest.raises(SourceUnavailable):
        load_words(None)


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")
    with pytest.raises(SourceUnavailable) as excinfo:
        load_words(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
