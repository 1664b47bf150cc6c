"""Grid representation, slot extraction and black-mask geometry checks."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence, Set, Tuple

from ..core.constants import BLACK, MIN_WORD_LENGTH, ORTHOGONAL_STEPS, UNKNOWN, Bounds, Direction
from ..core.models import GridSpec, Position, Slot
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

BlackMask = List[List[bool]]


class CellGrid:
    """Index-addressed cell arena.

    Cell ``(x, y)`` lives at index ``y * width + x``. Each entry is a letter,
    ``BLACK`` or ``UNKNOWN``. Slots reference cells by index, so a backtracking
    restore is a plain list copy.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.bounds = Bounds(width=width, height=height)
        self.cells: List[str] = [UNKNOWN] * (width * height)

    @classmethod
    def from_spec(cls, spec: GridSpec) -> "CellGrid":
        grid = cls(spec.width, spec.height)
        for pos in spec.black_squares:
            if not grid.bounds.contains(pos.x, pos.y):
                raise ValueError(f"Black square outside bounds: {(pos.x, pos.y)}")
            grid.cells[grid.index(pos.x, pos.y)] = BLACK
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "CellGrid":
        """Build a grid from row strings using ``#`` for black cells."""

        if not rows:
            raise ValueError("At least one row is required")
        grid = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            if len(row) != grid.width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {grid.width}")
            for x, char in enumerate(row):
                if char == BLACK:
                    grid.cells[grid.index(x, y)] = BLACK
                elif char.isalpha():
                    grid.cells[grid.index(x, y)] = char.upper()
        return grid

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def get(self, x: int, y: int) -> str:
        return self.cells[self.index(x, y)]

    def is_black(self, x: int, y: int) -> bool:
        return self.get(x, y) == BLACK

    def black_mask(self) -> BlackMask:
        return [[self.is_black(x, y) for x in range(self.width)] for y in range(self.height)]

    def is_complete(self) -> bool:
        return UNKNOWN not in self.cells

    # ------------------------------------------------------------------
    # Slot helpers
    # ------------------------------------------------------------------
    def pattern(self, slot: Slot) -> str:
        return "".join(self.cells[idx] for idx in slot.indices)

    def conflicts(self, slot: Slot, word: str) -> bool:
        """Return True when ``word`` disagrees with a letter already placed."""

        for idx, letter in zip(slot.indices, word):
            current = self.cells[idx]
            if current != UNKNOWN and current != letter:
                return True
        return False

    def place(self, slot: Slot, word: str) -> None:
        if len(word) != slot.length:
            raise ValueError(f"{word!r} does not fit slot {slot.id} of length {slot.length}")
        for idx, letter in zip(slot.indices, word):
            self.cells[idx] = letter

    def snapshot(self) -> List[str]:
        return list(self.cells)

    def restore(self, snapshot: List[str]) -> None:
        self.cells[:] = snapshot

    def letter_matrix(self) -> List[List[str]]:
        return [
            self.cells[y * self.width : (y + 1) * self.width] for y in range(self.height)
        ]

    def row_strings(self) -> List[str]:
        return ["".join(row) for row in self.letter_matrix()]


def _runs(line: Sequence[bool]) -> Iterable[Tuple[int, int]]:
    """Yield ``(start, length)`` for every maximal run of white cells."""

    start = None
    for i, black in enumerate(line):
        if not black and start is None:
            start = i
        elif black and start is not None:
            yield start, i - start
            start = None
    if start is not None:
        yield start, len(line) - start


def extract_slots(grid: CellGrid) -> List[Slot]:
    """Return every white run of length >= 3 as a slot.

    Across slots come first in row-major order, then down slots in
    column-major order; ids follow that order. Shorter runs are skipped.
    """

    mask = grid.black_mask()
    slots: List[Slot] = []
    for y in range(grid.height):
        for start, length in _runs(mask[y]):
            if length < MIN_WORD_LENGTH:
                continue
            slots.append(
                Slot.from_run(len(slots), Position(start, y), Direction.ACROSS, length, grid.width)
            )
    for x in range(grid.width):
        column = [mask[y][x] for y in range(grid.height)]
        for start, length in _runs(column):
            if length < MIN_WORD_LENGTH:
                continue
            slots.append(
                Slot.from_run(len(slots), Position(x, start), Direction.DOWN, length, grid.width)
            )
    LOGGER.debug("Extracted %d slots from %dx%d grid", len(slots), grid.width, grid.height)
    return slots


# ----------------------------------------------------------------------
# Black-mask geometry
# ----------------------------------------------------------------------
def mask_from_positions(width: int, height: int, black_squares: Iterable[Position]) -> BlackMask:
    mask = [[False] * width for _ in range(height)]
    for pos in black_squares:
        mask[pos.y][pos.x] = True
    return mask


def is_symmetric(mask: BlackMask) -> bool:
    """Check 180° rotational symmetry of the black squares."""

    height = len(mask)
    width = len(mask[0]) if mask else 0
    return all(
        mask[y][x] == mask[height - 1 - y][width - 1 - x]
        for y in range(height)
        for x in range(width)
    )


def is_connected(mask: BlackMask) -> bool:
    """Return True when every white cell is reachable from every other one."""

    height = len(mask)
    width = len(mask[0]) if mask else 0
    white = [(x, y) for y in range(height) for x in range(width) if not mask[y][x]]
    if not white:
        return True

    seen: Set[Tuple[int, int]] = {white[0]}
    queue = deque([white[0]])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ORTHOGONAL_STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and not mask[ny][nx] and (nx, ny) not in seen:
                seen.add((nx, ny))
                queue.append((nx, ny))
    return len(seen) == len(white)


def short_runs(mask: BlackMask) -> List[Tuple[Direction, Position, int]]:
    """Return every white run of length 1-2 as ``(direction, start, length)``."""

    height = len(mask)
    width = len(mask[0]) if mask else 0
    found: List[Tuple[Direction, Position, int]] = []
    for y in range(height):
        for start, length in _runs(mask[y]):
            if length < MIN_WORD_LENGTH:
                found.append((Direction.ACROSS, Position(start, y), length))
    for x in range(width):
        column = [mask[y][x] for y in range(height)]
        for start, length in _runs(column):
            if length < MIN_WORD_LENGTH:
                found.append((Direction.DOWN, Position(x, start), length))
    return found


__all__ = [
    "BlackMask",
    "CellGrid",
    "extract_slots",
    "is_connected",
    "is_symmetric",
    "mask_from_positions",
    "short_runs",
]
