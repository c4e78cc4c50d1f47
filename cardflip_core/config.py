from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from .errors import InvalidConfig


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class GameConfig:
    """Immutable difficulty descriptor: grid shape plus display name and description."""
    difficulty: Difficulty
    rows: int
    cols: int
    difficulty_name: str
    description: str

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidConfig(f"grid must be positive, got {self.rows}x{self.cols}")
        if (self.rows * self.cols) % 2 != 0:
            raise InvalidConfig(f"{self.rows}x{self.cols} grid has an odd number of cards")

    @property
    def total_cards(self) -> int:
        return self.rows * self.cols

    @property
    def total_pairs(self) -> int:
        return self.total_cards // 2


def _describe(rows: int, cols: int) -> str:
    return f"{rows}×{cols} Grid • {rows * cols // 2} Unique Pairs"


EASY = GameConfig(Difficulty.EASY, 4, 4, "Easy", _describe(4, 4))
MEDIUM = GameConfig(Difficulty.MEDIUM, 6, 6, "Medium", _describe(6, 6))
HARD = GameConfig(Difficulty.HARD, 8, 8, "Hard", _describe(8, 8))

PRESETS: Dict[Difficulty, GameConfig] = {
    Difficulty.EASY: EASY,
    Difficulty.MEDIUM: MEDIUM,
    Difficulty.HARD: HARD,
}


def preset(name: Union[str, Difficulty, GameConfig]) -> GameConfig:
    """Resolves a Difficulty, a case-insensitive preset name, or a config to a GameConfig."""
    if isinstance(name, GameConfig):
        return name
    if isinstance(name, Difficulty):
        return PRESETS[name]
    if isinstance(name, str):
        try:
            return PRESETS[Difficulty(name.strip().lower())]
        except ValueError:
            pass
    raise InvalidConfig(f"unknown difficulty: {name!r}")
