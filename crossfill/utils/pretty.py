"""Pretty-print helpers for filled grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Optional

from ..core.constants import BLACK

if TYPE_CHECKING:
    from ..core.models import FilledGrid
    from ..data.lexicon import Lexicon
    from ..engine.generator import CrosswordResult


def format_grid(filled: FilledGrid) -> str:
    width = filled.width
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(filled.letters):
        row_render = " ".join(f"{'#' if char == BLACK else char:>2}" for char in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(filled: FilledGrid, *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(filled), file=stream)


def print_fill_stats(
    result: CrosswordResult,
    lexicon: Optional[Lexicon] = None,
    *,
    stream=None,
) -> None:
    """Print grid + word statistics for a completed fill."""

    stream = stream or sys.stdout
    filled = result.filled
    print(format_grid(filled), file=stream)

    # --- Grid geometry ---
    total_cells = filled.width * filled.height
    black_cells = len(filled.black_squares())
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {filled.width} x {filled.height} ({total_cells} cells)", file=stream)
    print(f"  Black squares: {black_cells} ({black_cells / total_cells * 100:.0f}%)", file=stream)

    # --- Words ---
    words = filled.words
    lengths = [len(w) for w in words]
    across = sum(1 for item in filled.slots if item.slot.direction.value == "across")
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Total slots:   {len(words)} ({across} across, {len(words) - across} down)", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    # --- Scores ---
    scores: List[int] = [item.score for item in filled.slots]
    if scores:
        print(file=stream)
        print("--- Scores ---", file=stream)
        print(f"  Average score: {sum(scores) / len(scores):.1f}", file=stream)
        print(f"  Lowest:        {min(scores)}", file=stream)
        low = sorted(item.word for item in filled.slots if item.score < 50)
        if low:
            print(f"  Below 50:      {', '.join(low)}", file=stream)
    if lexicon is not None:
        overused = sorted(word for word in words if lexicon.is_overused(word))
        print(f"  Crosswordese:  {len(overused)}{' (' + ', '.join(overused) + ')' if overused else ''}", file=stream)

    # --- Validation ---
    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    print(file=stream)
    print(f"Elapsed: {result.elapsed_seconds:.2f}s", file=stream)
    if result.seed is not None:
        print(f"Seed: {result.seed}", file=stream)
