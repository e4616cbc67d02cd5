import logging

import pytest

WORDLE_ENV_VARS = (
    "WORDLE_WORD_LIST",
    "WORDLE_WORD_LENGTH",
    "WORDLE_MAX_ATTEMPTS",
    "WORDLE_SEED",
    "WORDLE_COLOR",
    "WORDLE_LOG_LEVEL",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Empty values read as "unset" and are removed again on teardown,
    # including anything a .env file loaded during the test.
    for name in WORDLE_ENV_VARS:
        monkeypatch.setenv(name, "")


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def scripted_input():
    """Build a fake ``input`` that replays ``answers`` and records prompts."""

    def factory(answers):
        answers = iter(answers)
        prompts = []

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(answers)
            except StopIteration:
                raise EOFError from None

        fake_input.prompts = prompts
        return fake_input

    return factory


@pytest.fixture
def word_file(tmp_path):
    def factory(*lines):
        path = tmp_path / "word_list.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return factory
