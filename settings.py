"""
Configuration settings for the terminal Wordle game.

Defaults live here as module constants; a ``.env`` file or the process
environment can override them through :func:`load_settings`.
"""
from __future__ import annotations

import logging
import os
import site
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

# Directory holding the modules (and the bundled word list)
BASE_DIR = Path(__file__).resolve().parent

WORD_LENGTH = 5
MAX_ATTEMPTS = 6
WORD_LIST_NAME = "word_list.txt"
# Installed copies live under <prefix>/share/<DATA_DIR_NAME>, see pyproject.toml
DATA_DIR_NAME = "terminal-wordle"
DEFAULT_LOG_LEVEL = "WARNING"

_FALSE_VALUES = {"0", "false", "no", "off"}


def find_word_list() -> Path:
    """Locate the bundled word list.

    A source checkout or editable install keeps it beside the modules; a
    regular install puts it in the data directory of the environment
    (or of the user scheme for ``--user`` installs).
    """
    candidates = [
        BASE_DIR / WORD_LIST_NAME,
        Path(sys.prefix) / "share" / DATA_DIR_NAME / WORD_LIST_NAME,
    ]
    user_base = getattr(site, "USER_BASE", None)
    if user_base:
        candidates.append(Path(user_base) / "share" / DATA_DIR_NAME / WORD_LIST_NAME)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return candidates[0]


DEFAULT_WORD_LIST = find_word_list()


def _read_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def _read_seed() -> Optional[int]:
    raw = os.environ.get("WORDLE_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"WORDLE_SEED must be an integer, got {raw!r}") from None


def _read_log_level() -> str:
    raw = os.environ.get("WORDLE_LOG_LEVEL", "").strip().upper()
    if not raw:
        return DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"WORDLE_LOG_LEVEL must be a logging level name, got {raw!r}")
    return raw


def _color_enabled() -> bool:
    # https://no-color.org: any non-empty value disables color
    if os.environ.get("NO_COLOR"):
        return False
    return os.environ.get("WORDLE_COLOR", "").strip().lower() not in _FALSE_VALUES


def load_settings(env_file: Optional[Path] = None) -> Dict[str, Any]:
    """Load game settings from ``.env`` files and the environment.

    Variables already present in the environment win over ``.env`` values.
    Raises ``ValueError`` for malformed numeric or log level overrides.
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(BASE_DIR / ".env")
        load_dotenv(Path.cwd() / ".env")

    word_list = os.environ.get("WORDLE_WORD_LIST", "").strip()
    return {
        "word_list": Path(word_list) if word_list else DEFAULT_WORD_LIST,
        "word_length": _read_positive_int("WORDLE_WORD_LENGTH", WORD_LENGTH),
        "max_attempts": _read_positive_int("WORDLE_MAX_ATTEMPTS", MAX_ATTEMPTS),
        "seed": _read_seed(),
        "color": _color_enabled(),
        "log_level": _read_log_level(),
    }
