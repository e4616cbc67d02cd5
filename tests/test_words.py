import random

import pytest

from settings import DEFAULT_WORD_LIST
from words import (
    NoValidWords,
    SourceUnavailable,
    WordListError,
    get_random_word,
    get_word_list,
    is_ascii_word,
    pick_secret,
)


def test_get_word_list_filters_and_normalizes(word_file):
    path = word_file("Crane", "  slate ", "abc", "planet", "cr4ne", "crane", "", "héllo", "\u212arane", "hello")
    assert get_word_list(path) == ["crane", "slate", "hello"]


def test_get_word_list_custom_length(word_file):
    path = word_file("crane", "planet", "forest")
    assert get_word_list(path, word_length=6) == ["planet", "forest"]


def test_get_word_list_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable):
        get_word_list(tmp_path / "missing.txt")


def test_get_word_list_directory_is_unavailable(tmp_path):
    with pytest.raises(SourceUnavailable):
        get_word_list(tmp_path)


def test_get_word_list_without_valid_words(word_file):
    path = word_file("abc", "planet", "")
    with pytest.raises(NoValidWords):
        get_word_list(path)


def test_word_list_errors_share_base_class():
    assert issubclass(SourceUnavailable, WordListError)
    assert issubclass(NoValidWords, WordListError)


def test_pick_secret_is_reproducible_with_seed():
    words = ["crane", "slate", "hello", "world"]
    first = pick_secret(words, random.Random(42))
    assert first == pick_secret(words, random.Random(42))
    assert first in words


def test_pick_secret_empty():
    with pytest.raises(NoValidWords):
        pick_secret([])


def test_get_random_word_returns_listed_word(word_file):
    path = word_file("crane", "slate")
    assert get_random_word(path, rng=random.Random(7)) in {"crane", "slate"}


def test_bundled_word_list_is_usable():
    words = get_word_list(DEFAULT_WORD_LIST)
    assert len(words) > 100
    assert all(len(word) == 5 and word.isalpha() and word.islower() for word in words)


def test_is_ascii_word_checks_raw_characters():
    # KELVIN SIGN lowercases to an ASCII "k"
    assert not is_ascii_word("\u212arane")
    assert is_ascii_word("CRANE")
