"""
Game parameters.

Single place to:
- Validate the four numbers that size a game (validate_config)
- Hold them as an immutable Configuration
- Read launch defaults from the environment / a local .env (load_settings)
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import (
    InfeasibleUniqueSequence,
    InvalidColorCount,
    InvalidGuessLimit,
    InvalidHoleCount,
)

logger = logging.getLogger(__name__)

DEFAULT_COLORS = 6
DEFAULT_HOLES = 4
DEFAULT_GUESSES = 8
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


class Configuration(BaseModel):
    """Validated sizing/rule parameters for one game. Build it with validate_config()."""

    model_config = ConfigDict(frozen=True)

    color_count: int = Field(..., ge=2, description="Number of distinct colors")
    hole_count: int = Field(..., ge=1, description="Number of holes per row")
    max_guesses: int = Field(..., ge=1, description="Guesses allowed before the game is lost")
    allow_duplicates: bool = Field(True, description="May a color repeat in the secret?")

    @model_validator(mode="after")
    def _unique_secret_is_possible(self) -> "Configuration":
        if not self.allow_duplicates and self.color_count < self.hole_count:
            raise ValueError("color_count must be >= hole_count when duplicates are forbidden")
        return self


def validate_config(
    color_count: int,
    hole_count: int,
    max_guesses: int,
    allow_duplicates: bool,
) -> Configuration:
    """
    Check the parameters in a fixed order and raise the first failing ConfigError kind.

    Example:
      validate_config(6, 4, 10, False)  -> ok (6 colors can fill 4 holes uniquely)
      validate_config(3, 4, 10, False)  -> InfeasibleUniqueSequence
    """
    if color_count < 2:
        raise InvalidColorCount(f"color count must be at least 2, got {color_count}")
    if hole_count < 1:
        raise InvalidHoleCount(f"hole count must be at least 1, got {hole_count}")
    if max_guesses < 1:
        raise InvalidGuessLimit(f"guess limit must be at least 1, got {max_guesses}")
    if not allow_duplicates and color_count < hole_count:
        raise InfeasibleUniqueSequence(
            f"{color_count} colors cannot fill {hole_count} holes without duplicates"
        )

    return Configuration(
        color_count=color_count,
        hole_count=hole_count,
        max_guesses=max_guesses,
        allow_duplicates=allow_duplicates,
    )


# ---------------- Launch defaults ----------------

class SettingsError(ValueError):
    """An environment variable holds something that is not a usable value."""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    colors: int = DEFAULT_COLORS
    holes: int = DEFAULT_HOLES
    guesses: int = DEFAULT_GUESSES
    no_duplicate: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise SettingsError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise SettingsError(f"{name} must be a boolean (true/false), got {raw!r}")


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise SettingsError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Read MASTERMIND_* variables, after merging a .env file if present.
    Real environment variables win over the .env file.
    """
    # dev convenience; a shell export overrides it
    load_dotenv(dotenv_path=dotenv_path, override=False)

    settings = Settings(
        colors=_env_int("MASTERMIND_COLORS", DEFAULT_COLORS),
        holes=_env_int("MASTERMIND_HOLES", DEFAULT_HOLES),
        guesses=_env_int("MASTERMIND_GUESSES", DEFAULT_GUESSES),
        no_duplicate=_env_bool("MASTERMIND_NO_DUPLICATE", False),
        log_level=_env_log_level("MASTERMIND_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
    logger.debug("loaded settings %s", settings)
    return settings
