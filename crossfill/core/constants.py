"""Shared constants and enumerations for the grid filler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"


BLACK = "#"
UNKNOWN = "?"
WILDCARDS = frozenset({"?", "_"})

MIN_WORD_LENGTH = 3
DEFAULT_WORD_SCORE = 40
MAX_WORD_SCORE = 100
DEFAULT_MIN_WORD_SCORE = 30

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


@dataclass(frozen=True)
class SizePreset:
    """Named grid size with its black-square density target."""

    width: int
    height: int
    density: float


SIZE_PRESETS: Dict[str, SizePreset] = {
    "mini": SizePreset(width=5, height=5, density=0.12),
    "midi": SizePreset(width=11, height=11, density=0.14),
    "daily": SizePreset(width=15, height=15, density=0.16),
    "sunday": SizePreset(width=21, height=21, density=0.15),
}


class Difficulty(str, Enum):
    """Puzzle difficulty; harder grids carry more black squares."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


DIFFICULTY_DENSITY: Dict[Difficulty, float] = {
    Difficulty.EASY: 0.06,
    Difficulty.MEDIUM: 0.08,
    Difficulty.HARD: 0.10,
    Difficulty.EXPERT: 0.12,
}


class FillStrategy(str, Enum):
    """Search backend used to fill a grid."""

    BACKTRACKING = "backtracking"
    CPSAT = "cpsat"
