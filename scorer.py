from __future__ import annotations

import enum
from typing import Dict, List, Tuple


class LetterStatus(str, enum.Enum):
    """Feedback category for a single guess position."""

    HIT = "green"
    PRESENT = "yellow"
    MISS = "gray"


Feedback = Tuple[LetterStatus, ...]


def score(secret: str, guess: str) -> Feedback:
    """Score ``guess`` against ``secret`` with Wordle rules.

    Exact matches are resolved first and consume their secret position.
    Remaining guess letters then take the leftmost unconsumed occurrence
    in the secret, so a letter is never credited more times than it
    appears in the secret.
    """
    if len(secret) != len(guess):
        raise ValueError(
            f"guess has {len(guess)} letters, expected {len(secret)}"
        )

    secret_chars = secret.lower()
    guess_chars = guess.lower()
    size = len(secret_chars)
    statuses: List[LetterStatus] = [LetterStatus.MISS] * size
    secret_used = [False] * size

    # Greens first
    for i in range(size):
        if guess_chars[i] == secret_chars[i]:
            statuses[i] = LetterStatus.HIT
            secret_used[i] = True

    # Yellows
    for i in range(size):
        if statuses[i] is LetterStatus.HIT:
            continue
        for j in range(size):
            if not secret_used[j] and guess_chars[i] == secret_chars[j]:
                statuses[i] = LetterStatus.PRESENT
                secret_used[j] = True
                break

    return tuple(statuses)


def is_solved(feedback: Feedback) -> bool:
    return bool(feedback) and all(status is LetterStatus.HIT for status in feedback)


def feedback_statuses(guess: str, feedback: Feedback) -> List[Dict[str, str]]:
    """Return one ``{letter, status}`` record per position.

    Letters are uppercased and statuses are the plain category names
    (``green`` / ``yellow`` / ``gray``), without any terminal codes.
    """
    return [
        {"letter": letter.upper(), "status": status.value}
        for letter, status in zip(guess, feedback)
    ]


__all__ = [
    "Feedback",
    "LetterStatus",
    "feedback_statuses",
    "is_solved",
    "score",
]
