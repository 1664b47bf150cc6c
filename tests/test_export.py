import json
import tempfile
import unittest
from pathlib import Path

from crossfill.core.constants import Direction
from crossfill.core.exceptions import CrosswordError
from crossfill.core.models import FilledGrid, FilledSlot, Position
from crossfill.engine.grid import CellGrid, extract_slots
from crossfill.io.export import batch_paths, dump_filled_grid, iter_grid_files, load_filled_grid


def sample_grid() -> FilledGrid:
    rows = ["#BCDE", "FGHIJ", "KLMNO", "PQRST", "UVWX#"]
    grid = CellGrid.from_rows(rows)
    slots = [FilledSlot(slot, grid.pattern(slot), 60) for slot in extract_slots(grid)]
    return FilledGrid(5, 5, [list(row) for row in rows], slots, seed=12)


class ExportTests(unittest.TestCase):
    def test_json_document_shape(self) -> None:
        payload = sample_grid().to_jsonable()
        self.assertEqual(payload["grid"][0], "#BCDE")
        self.assertEqual(payload["seed"], 12)
        self.assertEqual(
            payload["slots"][0],
            {
                "id": 0,
                "direction": "across",
                "start": {"x": 1, "y": 0},
                "length": 4,
                "word": "BCDE",
                "score": 60,
            },
        )

    def test_dump_and_load(self) -> None:
        original = sample_grid()
        with tempfile.TemporaryDirectory() as tmpdir:
            path = dump_filled_grid(original, Path(tmpdir) / "out" / "grid.json")
            loaded = load_filled_grid(path)
        self.assertEqual(loaded.row_strings(), original.row_strings())
        self.assertEqual(loaded.words, original.words)
        self.assertEqual(loaded.slots[-1].slot.direction, Direction.DOWN)
        self.assertEqual(loaded.black_squares(), [Position(0, 0), Position(4, 4)])
        self.assertEqual(loaded.seed, 12)

    def test_load_rejects_bad_documents(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            broken = Path(tmpdir) / "broken.json"
            broken.write_text("{not json", encoding="utf-8")
            with self.assertRaises(CrosswordError):
                load_filled_grid(broken)

            incomplete = Path(tmpdir) / "incomplete.json"
            incomplete.write_text(json.dumps({"width": 3}), encoding="utf-8")
            with self.assertRaises(CrosswordError):
                load_filled_grid(incomplete)

    def test_iter_grid_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "b.json").write_text("{}", encoding="utf-8")
            (root / "a.json").write_text("{}", encoding="utf-8")
            (root / "notes.txt").write_text("", encoding="utf-8")
            self.assertEqual([p.name for p in iter_grid_files(root)], ["a.json", "b.json"])
            self.assertEqual(list(iter_grid_files(root / "a.json")), [root / "a.json"])

    def test_batch_paths(self) -> None:
        paths = batch_paths("out/grid.json", 2)
        self.assertEqual(paths, [(1, Path("out/grid_001.json")), (2, Path("out/grid_002.json"))])


if __name__ == "__main__":
    unittest.main()
