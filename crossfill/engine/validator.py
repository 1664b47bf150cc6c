"""Structural validation of filled grids."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..core.constants import BLACK, Direction
from ..core.models import FilledGrid, Position
from .grid import CellGrid, extract_slots, is_connected, is_symmetric, short_runs


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class SolutionValidator:
    """Re-checks a filled grid independently of how it was produced.

    Every check runs and contributes messages; nothing here raises, so the
    caller decides whether a result is usable.
    """

    def validate(self, filled: FilledGrid) -> ValidationResult:
        messages: List[str] = []
        if not self._check_dimensions(filled, messages):
            return ValidationResult(ok=False, messages=messages)

        grid = CellGrid.from_rows(filled.row_strings())
        mask = grid.black_mask()
        self._check_letters(filled, messages)
        if not is_symmetric(mask):
            messages.append("Black squares are not 180° symmetric")
        if not is_connected(mask):
            messages.append("White cells are not connected")
        for direction, start, length in short_runs(mask):
            messages.append(
                f"{direction.value} run of length {length} at ({start.x},{start.y}) is shorter than 3"
            )

        slots = extract_slots(grid)
        owners = Counter(idx for slot in slots for idx in slot.indices)
        for y in range(grid.height):
            for x in range(grid.width):
                if not grid.is_black(x, y) and owners[grid.index(x, y)] != 2:
                    messages.append(f"Cell ({x},{y}) is not crossed by both an across and a down word")

        self._check_assignments(filled, grid, slots, messages)
        return ValidationResult(ok=not messages, messages=messages)

    # ------------------------------------------------------------------
    # Individual checks
    # ------------------------------------------------------------------
    def _check_dimensions(self, filled: FilledGrid, messages: List[str]) -> bool:
        if filled.width <= 0 or filled.height <= 0:
            messages.append(f"Invalid dimensions {filled.width}x{filled.height}")
            return False
        if len(filled.letters) != filled.height:
            messages.append(f"Grid has {len(filled.letters)} rows, expected {filled.height}")
            return False
        for y, row in enumerate(filled.letters):
            if len(row) != filled.width:
                messages.append(f"Row {y} has {len(row)} cells, expected {filled.width}")
                return False
        return True

    def _check_letters(self, filled: FilledGrid, messages: List[str]) -> None:
        for y, row in enumerate(filled.letters):
            for x, char in enumerate(row):
                if char != BLACK and not ("A" <= char <= "Z"):
                    messages.append(f"Cell ({x},{y}) holds {char!r} instead of a letter")

    def _check_assignments(self, filled, grid, slots, messages) -> None:
        expected: Dict[Tuple[Direction, Position], int] = {
            (slot.direction, slot.start): slot.length for slot in slots
        }
        seen: Counter = Counter()
        for item in filled.slots:
            key = (item.slot.direction, item.slot.start)
            label = f"{item.slot.direction.value} slot at ({item.slot.start.x},{item.slot.start.y})"
            seen[key] += 1
            if key not in expected:
                messages.append(f"{label} does not exist in the grid")
                continue
            if expected[key] != item.slot.length:
                messages.append(
                    f"{label} has length {item.slot.length}, grid run is {expected[key]}"
                )
                continue
            if len(item.word) != item.slot.length:
                messages.append(
                    f"{label} holds {item.word} of length {len(item.word)}, expected {item.slot.length}"
                )
                continue
            placed = "".join(grid.get(pos.x, pos.y) for pos in item.slot.cells)
            if placed != item.word.upper():
                messages.append(f"{label} word {item.word} does not match grid letters {placed}")

        for key in expected:
            if seen[key] == 0:
                messages.append(
                    f"{key[0].value} slot at ({key[1].x},{key[1].y}) has no assigned word"
                )
            elif seen[key] > 1:
                messages.append(
                    f"{key[0].value} slot at ({key[1].x},{key[1].y}) is assigned {seen[key]} times"
                )

        counts = Counter(item.word.upper() for item in filled.slots)
        for word, count in sorted(counts.items()):
            if count > 1:
                messages.append(f"Word {word} is used {count} times")


__all__ = ["SolutionValidator", "ValidationResult"]
