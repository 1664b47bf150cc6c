"""JSON persistence for filled grids."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, List, Tuple

from ..core.exceptions import CrosswordError
from ..core.models import FilledGrid


def dump_filled_grid(filled: FilledGrid, path: Path | str) -> Path:
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8") as handle:
        json.dump(filled.to_jsonable(), handle, indent=2)
        handle.write("\n")
    return destination


def load_filled_grid(path: Path | str) -> FilledGrid:
    source = Path(path)
    try:
        with source.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        return FilledGrid.from_jsonable(payload)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        raise CrosswordError(f"Cannot read filled grid from {source}: {exc}") from exc


def iter_grid_files(path: Path | str) -> Iterator[Path]:
    """Yield ``path`` itself, or every ``*.json`` below it when it is a directory."""
    source = Path(path)
    if source.is_dir():
        yield from sorted(source.glob("*.json"))
    else:
        yield source


def batch_paths(output: Path | str, count: int) -> List[Tuple[int, Path]]:
    """Numbered output files for a batch: ``grid.json`` -> ``grid_001.json``..."""
    base = Path(output)
    return [
        (index, base.with_name(f"{base.stem}_{index:03d}{base.suffix or '.json'}"))
        for index in range(1, count + 1)
    ]


__all__ = ["batch_paths", "dump_filled_grid", "iter_grid_files", "load_filled_grid"]
