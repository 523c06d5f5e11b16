"""
Labels for clarity.
"""

from enum import Enum
from typing import Tuple

Color = int  # 0 -> color_count - 1
Code = Tuple[Color, ...]  # one color per hole


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_over(self) -> bool:
        return self is not GameStatus.IN_PROGRESS
