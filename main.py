import functools
import logging
import random
import sys

from colorama import just_fix_windows_console

from settings import load_settings
from utils import display_feedback
from wordle import Wordle, play_game
from words import WordListError, get_random_word

logger = logging.getLogger(__name__)


def main():
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    just_fix_windows_console()

    rng = random.Random(settings["seed"])
    try:
        word_to_guess = get_random_word(settings["word_list"], settings["word_length"], rng)
    except WordListError as exc:
        logger.error("Unable to choose a secret word: %s", exc)
        print(exc, file=sys.stderr)
        return 1

    game = Wordle(word_to_guess, settings["max_attempts"], settings["word_length"])
    logger.info("New game: %d letters, %d attempts", game.word_length, game.max_attempts)

    print("Welcome to Wordle!")
    print(f"Guess the {game.word_length}-letter word. You have {game.max_attempts} attempts.")

    render = functools.partial(display_feedback, color=settings["color"])
    try:
        play_game(game, read_guess=input, render=render)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
