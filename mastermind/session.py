"""
In-memory play session
Holds the current game and a scoreboard for the games played since launch.
Nothing here outlives the process.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .config import Configuration
from .engine import Feedback, GameState, GuessRecord, new_game, submit_guess
from .schemas import StatsOut
from .types import Color, GameStatus

logger = logging.getLogger(__name__)


# Scoreboard structure
@dataclass
class Stats:
    games_started: int = 0
    games_won: int = 0
    games_lost: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_wins: int = 0
    fastest_win_attempts: Optional[int] = None

    def to_out(self) -> StatsOut:
        average = None
        if self.games_won > 0:
            average = self.total_guesses_in_wins / self.games_won
        return StatsOut(
            games_started=self.games_started,
            games_won=self.games_won,
            games_lost=self.games_lost,
            current_streak=self.current_streak,
            best_streak=self.best_streak,
            average_guesses_to_win=average,
            fastest_win_attempts=self.fastest_win_attempts,
        )


class GameSession:
    def __init__(self, config: Configuration, random_source: random.Random) -> None:
        self.config = config
        self._random = random_source
        self._state: Optional[GameState] = None
        self._stats = Stats()

    def start(self) -> GameState:
        """Begin a new game; any game in progress is simply dropped."""
        self._state = new_game(self.config, self._random)
        self._stats.games_started += 1
        return self._state

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("No game started yet. Call start() first.")
        return self._state

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return self.state.history

    def guess(self, code: Sequence[Color]) -> Feedback:
        old_state = self.state
        # GuessError propagates untouched; the session keeps the old state
        feedback, self._state = submit_guess(old_state, code)

        # Update scoreboard exactly once, on the transition out of in_progress
        if not old_state.status.is_over and self._state.status.is_over:
            self._update_stats_on_end(self._state)
        return feedback

    # Helper updates scoreboard exactly once per game
    def _update_stats_on_end(self, game: GameState) -> None:
        guesses_used = len(game.history)
        if game.status is GameStatus.WON:
            self._stats.games_won += 1

            # streaks
            self._stats.current_streak += 1
            if self._stats.current_streak > self._stats.best_streak:
                self._stats.best_streak = self._stats.current_streak

            # guesses used
            self._stats.total_guesses_in_wins += guesses_used
            if self._stats.fastest_win_attempts is None or guesses_used < self._stats.fastest_win_attempts:
                self._stats.fastest_win_attempts = guesses_used
            logger.info("game won in %d guess(es)", guesses_used)
        else:
            self._stats.games_lost += 1
            self._stats.current_streak = 0
            logger.info("game lost after %d guess(es)", guesses_used)

    # public API for stats
    @property
    def stats(self) -> Stats:
        return self._stats

    def reset_stats(self) -> None:
        self._stats = Stats()
