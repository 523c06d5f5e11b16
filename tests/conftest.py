"""
- Keep MASTERMIND_* variables from the developer's shell out of the tests.
- Give each test a clean package logger (the CLI reconfigures it).
- Provide small helpers for building games with a known secret.
"""
import logging

import pytest

from mastermind.config import Configuration, validate_config
from mastermind.engine import GameState
from mastermind.logger import LOGGER_NAME

ENV_VARS = (
    "MASTERMIND_COLORS",
    "MASTERMIND_HOLES",
    "MASTERMIND_GUESSES",
    "MASTERMIND_NO_DUPLICATE",
    "MASTERMIND_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def config() -> Configuration:
    # classic board: 6 colors, 4 holes, 10 guesses
    return validate_config(6, 4, 10, True)


@pytest.fixture
def make_game():
    """Build a game whose secret we choose, so outcomes are predictable."""
    def _make_game(secret, color_count=6, max_guesses=10, allow_duplicates=True) -> GameState:
        cfg = validate_config(color_count, len(secret), max_guesses, allow_duplicates)
        return GameState(config=cfg, secret=tuple(secret))
    return _make_game
