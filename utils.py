from colorama import Back, Fore, Style

from scorer import LetterStatus

_BACKGROUNDS = {
    LetterStatus.HIT: Back.GREEN,
    LetterStatus.PRESENT: Back.YELLOW,
    LetterStatus.MISS: Back.LIGHTBLACK_EX,
}

_PLAIN_TEMPLATES = {
    LetterStatus.HIT: "[{}]",
    LetterStatus.PRESENT: "({})",
    LetterStatus.MISS: " {} ",
}


def format_letter(letter, status, color=True):
    status = LetterStatus(status)
    letter = letter.upper()
    if not color:
        return _PLAIN_TEMPLATES[status].format(letter)
    return f"{_BACKGROUNDS[status]}{Fore.LIGHTWHITE_EX}{letter}{Style.RESET_ALL}"


def display_feedback(guess, feedback, color=True):
    if len(guess) != len(feedback):
        raise ValueError("feedback must have one status per guess letter")
    tiles = [format_letter(letter, status, color) for letter, status in zip(guess, feedback)]
    return "Result: " + " ".join(tiles)
