"""Data models supporting the grid filler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .constants import BLACK, DEFAULT_MIN_WORD_SCORE, MIN_WORD_LENGTH, Direction


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based cell coordinate; ``x`` is the column and ``y`` the row."""

    x: int
    y: int


@dataclass(frozen=True)
class ScoredWord:
    """A dictionary word with its quality score (0-100)."""

    word: str
    score: int


@dataclass(frozen=True)
class Slot:
    """A maximal run of white cells that must hold one word."""

    id: int
    start: Position
    direction: Direction
    cells: Tuple[Position, ...]
    indices: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.cells) < MIN_WORD_LENGTH:
            raise ValueError(
                f"Slot {self.id} has length {len(self.cells)} (minimum {MIN_WORD_LENGTH})"
            )
        if len(self.cells) != len(self.indices):
            raise ValueError(f"Slot {self.id} cell and index lists differ in length")

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def key(self) -> Tuple[str, int, int, int]:
        """Identity of the slot independent of its numeric id."""
        return (self.direction.value, self.start.x, self.start.y, self.length)

    @classmethod
    def from_run(
        cls,
        slot_id: int,
        start: Position,
        direction: Direction,
        length: int,
        width: int,
    ) -> "Slot":
        dx, dy = (1, 0) if direction == Direction.ACROSS else (0, 1)
        cells = tuple(Position(start.x + dx * i, start.y + dy * i) for i in range(length))
        return cls(
            id=slot_id,
            start=start,
            direction=direction,
            cells=cells,
            indices=tuple(pos.y * width + pos.x for pos in cells),
        )


@dataclass(frozen=True)
class Constraint:
    """Two slots sharing one cell; their words must agree there."""

    slot_a: int
    index_a: int
    slot_b: int
    index_b: int


@dataclass(frozen=True)
class ThemeEntry:
    """A word pinned to a specific slot before search starts."""

    answer: str
    direction: Direction
    start: Position


@dataclass
class GridSpec:
    """Input to a fill attempt: the layout plus pinned words and score floor."""

    width: int
    height: int
    black_squares: Sequence[Position] = field(default_factory=list)
    theme_entries: Sequence[ThemeEntry] = field(default_factory=list)
    min_word_score: int = DEFAULT_MIN_WORD_SCORE


@dataclass(frozen=True)
class FilledSlot:
    slot: Slot
    word: str
    score: int


@dataclass
class FilledGrid:
    """A completely filled grid; black cells hold ``BLACK``."""

    width: int
    height: int
    letters: List[List[str]]
    slots: List[FilledSlot]
    seed: Optional[int] = None

    @property
    def words(self) -> List[str]:
        return [filled.word for filled in self.slots]

    def row_strings(self) -> List[str]:
        return ["".join(row) for row in self.letters]

    def black_squares(self) -> List[Position]:
        return [
            Position(x, y)
            for y, row in enumerate(self.letters)
            for x, letter in enumerate(row)
            if letter == BLACK
        ]

    def average_score(self) -> float:
        if not self.slots:
            return 0.0
        return sum(filled.score for filled in self.slots) / len(self.slots)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "grid": self.row_strings(),
            "slots": [
                {
                    "id": filled.slot.id,
                    "direction": filled.slot.direction.value,
                    "start": {"x": filled.slot.start.x, "y": filled.slot.start.y},
                    "length": filled.slot.length,
                    "word": filled.word,
                    "score": filled.score,
                }
                for filled in self.slots
            ],
            "seed": self.seed,
        }

    @classmethod
    def from_jsonable(cls, payload: Dict[str, Any]) -> "FilledGrid":
        width = int(payload["width"])
        height = int(payload["height"])
        letters = [list(row) for row in payload["grid"]]
        slots: List[FilledSlot] = []
        for item in payload.get("slots", []):
            slot = Slot.from_run(
                slot_id=int(item["id"]),
                start=Position(int(item["start"]["x"]), int(item["start"]["y"])),
                direction=Direction(item["direction"]),
                length=int(item["length"]),
                width=width,
            )
            slots.append(FilledSlot(slot=slot, word=str(item["word"]), score=int(item.get("score", 0))))
        return cls(width=width, height=height, letters=letters, slots=slots, seed=payload.get("seed"))
