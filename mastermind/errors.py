"""
Error kinds raised by the game.

Two families, both recoverable:
- ConfigError: bad game parameters, raised once before any game exists.
- GuessError: a rejected guess. The game state is left exactly as it was,
  so the caller just asks the player again.

Both subclass ValueError so existing `except ValueError` handlers keep working.
Winning and losing are normal outcomes and never raise.
"""


class MastermindError(Exception):
    """Base class for every error this package raises on purpose."""

    @property
    def kind(self) -> str:
        return type(self).__name__


# ---------------- Configuration ----------------

class ConfigError(MastermindError, ValueError):
    pass


class InvalidColorCount(ConfigError):
    pass


class InvalidHoleCount(ConfigError):
    pass


class InvalidGuessLimit(ConfigError):
    pass


class InfeasibleUniqueSequence(ConfigError):
    """Not enough distinct colors to fill every hole without repeating one."""


# ---------------- Guesses ----------------

class GuessError(MastermindError, ValueError):
    pass


class WrongLength(GuessError):
    pass


class ColorOutOfRange(GuessError):
    pass


class GameAlreadyOver(GuessError):
    pass
