"""Symmetric black-square layout generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import BLACK, SIZE_PRESETS
from ..core.models import Position
from ..utils.logger import get_logger
from .grid import is_connected, is_symmetric, mask_from_positions, short_runs

LOGGER = get_logger(__name__)

DEFAULT_DENSITY = 0.15

_OPEN_ROW = {size: "." * size for size in (5, 7, 9, 11, 13, 15)}

# Hand-checked layouts: symmetric, connected, no run shorter than 3.
CURATED_LAYOUTS: Dict[Tuple[int, int], List[List[str]]] = {
    (5, 5): [
        ["#....", ".....", ".....", ".....", "....#"],
        ["##...", "#....", ".....", "....#", "...##"],
    ],
    (7, 7): [
        ["...#...", "...#...", ".......", ".......", ".......", "...#...", "...#..."],
        ["##.....", "#......", ".......", ".......", ".......", "......#", ".....##"],
    ],
    (9, 9): [
        [
            "....#....",
            "....#....",
            ".........",
            "###......",
            ".........",
            "......###",
            ".........",
            "....#....",
            "....#....",
        ],
        ["#...#...#"] + [_OPEN_ROW[9]] * 7 + ["#...#...#"],
    ],
    (11, 11): [
        ["....#......"] * 3
        + [_OPEN_ROW[11]] * 2
        + ["###.....###"]
        + [_OPEN_ROW[11]] * 2
        + ["......#...."] * 3,
    ],
    (13, 13): [
        ["....#...#...."] * 3
        + [_OPEN_ROW[13]] * 3
        + ["###.......###"]
        + [_OPEN_ROW[13]] * 3
        + ["....#...#...."] * 3,
    ],
    (15, 15): [
        ["....#.....#...."] * 3
        + [_OPEN_ROW[15]]
        + [".......#......."]
        + [_OPEN_ROW[15]] * 2
        + ["###.........###"]
        + [_OPEN_ROW[15]] * 2
        + [".......#......."]
        + [_OPEN_ROW[15]]
        + ["....#.....#...."] * 3,
    ],
}


@dataclass
class PatternCheck:
    ok: bool
    messages: List[str]


def rows_to_positions(rows: Sequence[str]) -> List[Position]:
    return [
        Position(x, y)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char == BLACK
    ]


def positions_to_rows(width: int, height: int, black_squares: Sequence[Position]) -> List[str]:
    mask = mask_from_positions(width, height, black_squares)
    return ["".join(BLACK if black else "." for black in row) for row in mask]


def validate_pattern(width: int, height: int, black_squares: Sequence[Position]) -> PatternCheck:
    """Check symmetry, connectivity and minimum run length of a layout."""

    messages: List[str] = []
    for pos in black_squares:
        if not (0 <= pos.x < width and 0 <= pos.y < height):
            messages.append(f"Black square outside grid at ({pos.x},{pos.y})")
    if messages:
        return PatternCheck(ok=False, messages=messages)

    mask = mask_from_positions(width, height, black_squares)
    if not is_symmetric(mask):
        messages.append("Black squares are not 180° symmetric")
    if not is_connected(mask):
        messages.append("White cells are not connected")
    for direction, start, length in short_runs(mask):
        messages.append(
            f"{direction.value} run of length {length} at ({start.x},{start.y})"
        )
    return PatternCheck(ok=not messages, messages=messages)


def default_density(width: int, height: int) -> float:
    for preset in SIZE_PRESETS.values():
        if (preset.width, preset.height) == (width, height):
            return preset.density
    return DEFAULT_DENSITY


class PatternGenerator:
    """Produce valid black-square layouts for a grid size."""

    def __init__(self, rng: Optional[random.Random] = None, max_candidates: int = 100) -> None:
        self.rng = rng or random.Random()
        self.max_candidates = max_candidates

    def generate(
        self,
        width: int,
        height: int,
        density: Optional[float] = None,
        use_curated: bool = True,
    ) -> List[Position]:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        curated = CURATED_LAYOUTS.get((width, height)) if use_curated else None
        if curated:
            rows = self.rng.choice(curated)
            LOGGER.debug("Using curated %dx%d layout", width, height)
            return rows_to_positions(rows)

        if (width, height) == (5, 5):
            return []

        target = density if density is not None else default_density(width, height)
        for attempt in range(1, self.max_candidates + 1):
            candidate = self._random_candidate(width, height, target)
            if validate_pattern(width, height, candidate).ok:
                LOGGER.debug(
                    "Random %dx%d layout accepted on candidate %d (%d black)",
                    width,
                    height,
                    attempt,
                    len(candidate),
                )
                return candidate

        LOGGER.warning(
            "No valid %dx%d layout after %d candidates; using open grid",
            width,
            height,
            self.max_candidates,
        )
        return []

    def _random_candidate(self, width: int, height: int, density: float) -> List[Position]:
        total = width * height
        target = int(round(total * density))
        small = width <= 5 or height <= 5
        corners = {(0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)}
        # Cells up to and including the centre, by row-major index.
        half = (total - 1) // 2

        black = set()
        placements = 0
        while len(black) < target and placements < total * 4:
            placements += 1
            index = self.rng.randint(0, half)
            x, y = index % width, index // width
            if small and (x, y) in corners:
                continue
            black.add((x, y))
            black.add((width - 1 - x, height - 1 - y))
        return [Position(x, y) for x, y in sorted(black, key=lambda xy: (xy[1], xy[0]))]


__all__ = [
    "CURATED_LAYOUTS",
    "PatternCheck",
    "PatternGenerator",
    "default_density",
    "positions_to_rows",
    "rows_to_positions",
    "validate_pattern",
]
