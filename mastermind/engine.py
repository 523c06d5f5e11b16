"""
Pure game logic (no terminal, no storage).
We compute two feedback numbers for each guess:
- exact_matches: how many holes hold the right color in the right place
- color_matches: how many of the remaining holes hold a color that the secret
  still has somewhere else among its remaining holes

Exact matches are taken out first, then the leftovers are compared as multisets,
so a repeated color is never counted more often than it occurs in both rows.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Sequence, Tuple

from .config import Configuration
from .errors import ColorOutOfRange, GameAlreadyOver, WrongLength
from .random_source import generate_secret
from .types import Code, Color, GameStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feedback:
    exact_matches: int
    color_matches: int


@dataclass(frozen=True)
class GuessRecord:
    sequence: Code
    feedback: Feedback


@dataclass(frozen=True)
class GameState:
    config: Configuration
    # hidden from repr so a stray log line or traceback cannot leak it
    secret: Code = field(repr=False)
    history: Tuple[GuessRecord, ...] = ()
    status: GameStatus = GameStatus.IN_PROGRESS


def score_guess(secret: Sequence[Color], guess: Sequence[Color]) -> Feedback:
    """
    Example:
      secret = [R, G, B, Y]
      guess  = [R, R, G, B]
      exact_matches = 1  (index 0, R = R)
      leftovers: secret [G, B, Y], guess [R, G, B]
      color_matches = 2  (G and B; the extra R has nothing left to pair with)
    """

    # 0. Validate lengths match
    n = len(secret)
    if len(guess) != n:
        raise WrongLength(f"Secret and guess must be the same length ({n} vs {len(guess)}).")

    # 1. Count exact position matches, and tally colors of every other hole
    exact_matches = 0
    secret_counts: Dict[Color, int] = {}
    guess_counts: Dict[Color, int] = {}
    for secret_color, guess_color in zip(secret, guess):
        if secret_color == guess_color:
            exact_matches += 1
        else:
            secret_counts[secret_color] = secret_counts.get(secret_color, 0) + 1
            guess_counts[guess_color] = guess_counts.get(guess_color, 0) + 1

    # 2. Overlap of the leftovers is the sum of the smaller count for each color
    color_matches = 0
    for color, count in guess_counts.items():
        color_matches += min(count, secret_counts.get(color, 0))

    return Feedback(exact_matches=exact_matches, color_matches=color_matches)


def is_win(feedback: Feedback, config: Configuration) -> bool:
    return feedback.exact_matches == config.hole_count


def new_game(config: Configuration, random_source: random.Random) -> GameState:
    secret = generate_secret(config, random_source)
    logger.debug(
        "new game: %d colors, %d holes, %d guesses, duplicates=%s",
        config.color_count,
        config.hole_count,
        config.max_guesses,
        config.allow_duplicates,
    )
    return GameState(config=config, secret=secret)


def _check_guess(config: Configuration, guess: Sequence[Color]) -> Code:
    if len(guess) != config.hole_count:
        raise WrongLength(f"Guess must have exactly {config.hole_count} colors, got {len(guess)}.")

    for position, color in enumerate(guess):
        # bool is an int subclass but never a color
        if isinstance(color, bool) or not isinstance(color, int):
            raise ColorOutOfRange(f"Position {position + 1}: {color!r} is not a color.")
        if color < 0 or color >= config.color_count:
            raise ColorOutOfRange(
                f"Position {position + 1}: color {color} is outside 0..{config.color_count - 1}."
            )
    return tuple(guess)


def submit_guess(state: GameState, guess: Sequence[Color]) -> Tuple[Feedback, GameState]:
    """
    Score one guess and return (feedback, next state).
    A rejected guess raises a GuessError and `state` stays valid as-is.
    """
    if state.status.is_over:
        raise GameAlreadyOver(f"Game {state.status.value}. No more guesses allowed.")

    code = _check_guess(state.config, guess)
    feedback = score_guess(state.secret, code)
    history = state.history + (GuessRecord(sequence=code, feedback=feedback),)

    # Win takes precedence over running out on the very same guess
    if is_win(feedback, state.config):
        status = GameStatus.WON
    elif len(history) >= state.config.max_guesses:
        status = GameStatus.LOST
    else:
        status = GameStatus.IN_PROGRESS

    logger.debug(
        "guess %d/%d: %s -> %d exact, %d color (%s)",
        len(history),
        state.config.max_guesses,
        list(code),
        feedback.exact_matches,
        feedback.color_matches,
        status.value,
    )
    return feedback, replace(state, history=history, status=status)


def get_status(state: GameState) -> GameStatus:
    return state.status


def get_history(state: GameState) -> Tuple[GuessRecord, ...]:
    return state.history


def attempts_left(state: GameState) -> int:
    return max(0, state.config.max_guesses - len(state.history))


def reveal_secret(state: GameState) -> Optional[Code]:
    """The secret, once the game has ended (won or lost). None while still playing."""
    if state.status.is_over:
        return state.secret
    return None
