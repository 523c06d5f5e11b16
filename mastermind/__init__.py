"""
Mastermind: guess the hidden row of colored pegs before the guesses run out.
"""

from .config import Configuration, validate_config
from .engine import (
    Feedback,
    GameState,
    GuessRecord,
    get_history,
    get_status,
    new_game,
    reveal_secret,
    score_guess,
    submit_guess,
)
from .types import Code, Color, GameStatus

__version__ = "1.0.0"

__all__ = [
    "Code",
    "Color",
    "Configuration",
    "Feedback",
    "GameState",
    "GameStatus",
    "GuessRecord",
    "get_history",
    "get_status",
    "new_game",
    "reveal_secret",
    "score_guess",
    "submit_guess",
    "validate_config",
]
