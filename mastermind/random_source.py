"""
Where the secret comes from.

The random source is passed in explicitly, so a fixed seed replays the exact same game.
Without a seed we use the OS-backed SystemRandom, the same entropy `secrets` draws from.
"""

import random
from typing import Optional

from .config import Configuration
from .types import Code


def make_random_source(seed: Optional[int] = None) -> random.Random:
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)


def generate_secret(config: Configuration, rng: random.Random) -> Code:
    """
    Draw hole_count colors from [0, color_count).
      duplicates allowed   -> each hole independently and uniformly
      duplicates forbidden -> sample without replacement (always terminates,
                              every ordered arrangement equally likely)
    """
    if config.allow_duplicates:
        return tuple(rng.randrange(config.color_count) for _ in range(config.hole_count))

    # validate_config already guaranteed color_count >= hole_count
    return tuple(rng.sample(range(config.color_count), config.hole_count))
