"""
Read models for the presentation layer.
- Everything a screen needs to draw a game, and nothing it must not see:
  the secret is only filled in once the game is over.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .engine import GameState, GuessRecord, attempts_left, reveal_secret
from .types import GameStatus


# 1. Describes the feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: List[int] = Field(..., description="The player's guess")
    exact_matches: int = Field(..., description="Right color in the right hole")
    color_matches: int = Field(..., description="Right color in a different hole")
    message: str = Field(..., description="Feedback message")


# 2. Represents the overall state of one game
class GameView(BaseModel):
    status: GameStatus = Field(..., description="Current state of the game")
    attempts_left: int = Field(..., description="How many guesses remain")
    max_guesses: int = Field(..., description="Guesses allowed in this game")
    color_count: int = Field(..., description="Colors to choose from")
    hole_count: int = Field(..., description="Holes per row")
    history: List[GuessEntryOut] = Field(..., description="All guesses made so far with feedback")
    secret: Optional[List[int]] = Field(None, description="The secret (only revealed if game is over)")


# 3. Scoreboard for one play session
class StatsOut(BaseModel):
    games_started: int = Field(..., description="Total games started this session")
    games_won: int = Field(..., description="Total games won this session")
    games_lost: int = Field(..., description="Total games lost this session")

    current_streak: int = Field(..., description="Current consecutive wins")
    best_streak: int = Field(..., description="Best consecutive wins")

    average_guesses_to_win: Optional[float] = Field(
        None, description="Average number of guesses used in wins"
    )
    fastest_win_attempts: Optional[int] = Field(
        None, description="Fewest guesses taken to win a game"
    )


def feedback_message(exact_matches: int, color_matches: int) -> str:
    # Build a message without revealing which holes are correct
    if exact_matches == 0 and color_matches == 0:
        return "all incorrect"
    return f"{exact_matches} exact match(es) and {color_matches} color match(es)"


def build_guess_entry(record: GuessRecord) -> GuessEntryOut:
    return GuessEntryOut(
        guess=list(record.sequence),
        exact_matches=record.feedback.exact_matches,
        color_matches=record.feedback.color_matches,
        message=feedback_message(record.feedback.exact_matches, record.feedback.color_matches),
    )


def build_game_view(state: GameState) -> GameView:
    secret = reveal_secret(state)
    return GameView(
        status=state.status,
        attempts_left=attempts_left(state),
        max_guesses=state.config.max_guesses,
        color_count=state.config.color_count,
        hole_count=state.config.hole_count,
        history=[build_guess_entry(record) for record in state.history],
        secret=list(secret) if secret is not None else None,
    )
