import unittest

from crossfill.core.models import FilledGrid, FilledSlot
from crossfill.engine.grid import CellGrid, extract_slots
from crossfill.engine.validator import SolutionValidator

MINI_ROWS = ["ABCDE", "FGHIJ", "KLMNO", "PQRST", "UVWXY"]


def filled_from_rows(rows) -> FilledGrid:
    grid = CellGrid.from_rows(rows)
    slots = [
        FilledSlot(slot=slot, word=grid.pattern(slot), score=50) for slot in extract_slots(grid)
    ]
    return FilledGrid(
        width=grid.width,
        height=grid.height,
        letters=[list(row) for row in rows],
        slots=slots,
    )


class SolutionValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = SolutionValidator()

    def test_accepts_consistent_grid(self) -> None:
        result = self.validator.validate(filled_from_rows(MINI_ROWS))
        self.assertTrue(result.ok, result.messages)
        self.assertEqual(result.messages, [])

    def test_reports_duplicate_words(self) -> None:
        result = self.validator.validate(filled_from_rows(["BAT", "ARE", "TEN"]))
        self.assertFalse(result.ok)
        self.assertIn("Word BAT is used 2 times", result.messages)

    def test_reports_word_cell_mismatch(self) -> None:
        filled = filled_from_rows(MINI_ROWS)
        first = filled.slots[0]
        filled.slots[0] = FilledSlot(slot=first.slot, word="ZZZZZ", score=first.score)
        result = self.validator.validate(filled)
        self.assertFalse(result.ok)
        self.assertTrue(any("does not match grid letters ABCDE" in m for m in result.messages))

    def test_reports_missing_and_wrong_length_assignments(self) -> None:
        filled = filled_from_rows(MINI_ROWS)
        dropped = filled.slots.pop()
        second = filled.slots[1]
        filled.slots[1] = FilledSlot(slot=second.slot, word="FGH", score=second.score)
        result = self.validator.validate(filled)
        self.assertIn(
            f"down slot at ({dropped.slot.start.x},{dropped.slot.start.y}) has no assigned word",
            result.messages,
        )
        self.assertTrue(any("of length 3" in m for m in result.messages))

    def test_reports_asymmetry_and_short_runs(self) -> None:
        result = self.validator.validate(
            filled_from_rows(["AB#CD", "EFGHI", "JKLMN", "OPQRS", "TUVWX"])
        )
        self.assertIn("Black squares are not 180° symmetric", result.messages)
        self.assertTrue(any("shorter than 3" in m for m in result.messages))
        self.assertTrue(any("not crossed" in m for m in result.messages))

    def test_reports_disconnected_cells(self) -> None:
        rows = ["ABC", "###", "DEF"]
        result = self.validator.validate(filled_from_rows(rows))
        self.assertIn("White cells are not connected", result.messages)

    def test_reports_bad_dimensions(self) -> None:
        filled = filled_from_rows(MINI_ROWS)
        filled.height = 4
        result = self.validator.validate(filled)
        self.assertFalse(result.ok)
        self.assertEqual(result.messages, ["Grid has 5 rows, expected 4"])

    def test_reports_non_letters(self) -> None:
        filled = filled_from_rows(MINI_ROWS)
        filled.letters[2][2] = "?"
        result = self.validator.validate(filled)
        self.assertIn("Cell (2,2) holds '?' instead of a letter", result.messages)

    def test_validation_is_idempotent(self) -> None:
        filled = filled_from_rows(["AB#CD", "EFGHI", "JKLMN", "OPQRS", "TUVWX"])
        self.assertEqual(self.validator.validate(filled), self.validator.validate(filled))


if __name__ == "__main__":
    unittest.main()
