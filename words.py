from __future__ import annotations

import logging
import random
import string
from pathlib import Path
from typing import List, Optional, Sequence, Union

from settings import DEFAULT_WORD_LIST, WORD_LENGTH

logger = logging.getLogger(__name__)

_ASCII_LETTERS = frozenset(string.ascii_letters)


class WordListError(Exception):
    """Base class for word-list failures; fatal to a game session."""


class SourceUnavailable(WordListError):
    """The word-list resource could not be opened."""


class NoValidWords(WordListError):
    """The word-list resource holds no usable words."""


def is_ascii_word(word: str, word_length: int = WORD_LENGTH) -> bool:
    return len(word) == word_length and all(ch in _ASCII_LETTERS for ch in word)


def get_word_list(
    path: Union[str, Path] = DEFAULT_WORD_LIST,
    word_length: int = WORD_LENGTH,
) -> List[str]:
    """Read every usable candidate from ``path``, one word per line.

    Entries are stripped and lowercased; only words of ``word_length``
    ASCII letters are kept, first occurrence wins.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read word list %s: %s", path, exc)
        raise SourceUnavailable(f"Failed to open word list '{path}': {exc}") from exc

    words = list(
        dict.fromkeys(
            word.lower()
            for word in (line.strip() for line in lines)
            if is_ascii_word(word, word_length)
        )
    )
    logger.debug(
        "Loaded %d %d-letter words from %s (%d lines)",
        len(words),
        word_length,
        path,
        len(lines),
    )
    if not words:
        raise NoValidWords(f"No valid {word_length}-letter words found in '{path}'.")
    return words


def pick_secret(words: Sequence[str], rng: Optional[random.Random] = None) -> str:
    if not words:
        raise NoValidWords("Cannot pick a secret from an empty word list.")
    return (rng or random.Random()).choice(words)


def get_random_word(
    path: Union[str, Path] = DEFAULT_WORD_LIST,
    word_length: int = WORD_LENGTH,
    rng: Optional[random.Random] = None,
) -> str:
    """Load the word list and pick the secret for a new game."""
    return pick_secret(get_word_list(path, word_length), rng)
