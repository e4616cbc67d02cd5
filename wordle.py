from __future__ import annotations

import enum
import logging
from typing import Callable, List, Tuple

from scorer import Feedback, is_solved, score
from settings import MAX_ATTEMPTS, WORD_LENGTH
from utils import display_feedback
from words import is_ascii_word

logger = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    """Lifecycle of a single game session."""

    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    EXHAUSTED = "exhausted"


class Wordle:
    """State of one game: the secret, attempts used and the outcome."""

    def __init__(self, word: str, max_attempts: int = MAX_ATTEMPTS, word_length: int = WORD_LENGTH):
        if len(word) != word_length:
            raise ValueError(f"secret must have {word_length} letters, got {word!r}")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.word = word.lower()
        self.word_length = word_length
        self.max_attempts = max_attempts
        self.attempts = 0
        self.state = GameState.AWAITING_GUESS
        self.history: List[Tuple[str, Feedback]] = []

    def is_valid_guess(self, guess: str) -> bool:
        return is_ascii_word(guess, self.word_length)

    def check_guess(self, guess: str) -> Feedback:
        """Score ``guess`` and advance the session.

        A solving guess ends the game without using up an attempt; any
        other guess consumes one, and the last one exhausts the game.
        """
        if self.is_game_over():
            raise RuntimeError(f"game already finished ({self.state.value})")
        if not self.is_valid_guess(guess):
            raise ValueError(f"invalid guess {guess!r}")

        feedback = score(self.word, guess)
        self.history.append((guess.lower(), feedback))

        if is_solved(feedback):
            self.state = GameState.WON
        else:
            self.attempts += 1
            if self.attempts >= self.max_attempts:
                self.state = GameState.EXHAUSTED
        logger.debug(
            "Guess %r -> attempts=%d state=%s", guess, self.attempts, self.state.value
        )
        return feedback

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts

    def is_game_over(self) -> bool:
        return self.state is not GameState.AWAITING_GUESS

    def is_winner(self) -> bool:
        return self.state is GameState.WON


def play_game(
    game: Wordle,
    read_guess: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    render: Callable[[str, Feedback], str] = display_feedback,
) -> GameState:
    """Drive ``game`` to a terminal state, one guess per prompt."""
    while not game.is_game_over():
        guess = read_guess(f"Attempt {game.attempts + 1} of {game.max_attempts}: ").strip()

        if not game.is_valid_guess(guess):
            write(f"Please enter a {game.word_length}-letter word.")
            continue

        feedback = game.check_guess(guess)
        write(render(guess, feedback))

    if game.is_winner():
        logger.info("Game won after %d missed attempt(s)", game.attempts)
        write("Congratulations! You've guessed the word!")
    else:
        logger.info("Game lost, attempts exhausted")
        write(f"Sorry, you've run out of attempts. The word was '{game.word.upper()}'.")
    return game.state
