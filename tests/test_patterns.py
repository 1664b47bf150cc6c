import random
import unittest

from crossfill.core.models import Position
from crossfill.engine.grid import is_connected, is_symmetric, mask_from_positions
from crossfill.engine.patterns import (
    CURATED_LAYOUTS,
    PatternGenerator,
    default_density,
    positions_to_rows,
    rows_to_positions,
    validate_pattern,
)


class CuratedLayoutTests(unittest.TestCase):
    def test_every_curated_layout_is_valid(self) -> None:
        for (width, height), layouts in CURATED_LAYOUTS.items():
            for rows in layouts:
                with self.subTest(size=(width, height), rows=rows):
                    self.assertEqual(len(rows), height)
                    self.assertTrue(all(len(row) == width for row in rows))
                    check = validate_pattern(width, height, rows_to_positions(rows))
                    self.assertTrue(check.ok, check.messages)

    def test_curated_layout_is_used_for_common_sizes(self) -> None:
        black = PatternGenerator(random.Random(3)).generate(15, 15)
        self.assertIn(positions_to_rows(15, 15, black), CURATED_LAYOUTS[(15, 15)])

    def test_mini_without_curated_layout_is_open(self) -> None:
        self.assertEqual(PatternGenerator(random.Random(1)).generate(5, 5, use_curated=False), [])


class RandomLayoutTests(unittest.TestCase):
    def test_random_layouts_are_symmetric_and_connected(self) -> None:
        for seed in range(5):
            for width, height in ((8, 8), (10, 12), (17, 17)):
                with self.subTest(seed=seed, size=(width, height)):
                    black = PatternGenerator(random.Random(seed)).generate(width, height)
                    mask = mask_from_positions(width, height, black)
                    self.assertTrue(is_symmetric(mask))
                    self.assertTrue(is_connected(mask))
                    self.assertTrue(validate_pattern(width, height, black).ok)

    def test_same_seed_gives_same_layout(self) -> None:
        first = PatternGenerator(random.Random(42)).generate(12, 12)
        second = PatternGenerator(random.Random(42)).generate(12, 12)
        self.assertEqual(first, second)

    def test_small_grids_never_block_corners(self) -> None:
        generator = PatternGenerator(random.Random(9))
        corners = {Position(0, 0), Position(4, 0), Position(0, 6), Position(4, 6)}
        for _ in range(50):
            candidate = generator._random_candidate(5, 7, 0.3)
            self.assertFalse(corners & set(candidate))

    def test_falls_back_to_open_grid(self) -> None:
        generator = PatternGenerator(random.Random(0), max_candidates=0)
        with self.assertLogs("crossfill.engine.patterns", level="WARNING"):
            self.assertEqual(generator.generate(10, 10), [])

    def test_default_density_follows_presets(self) -> None:
        self.assertAlmostEqual(default_density(15, 15), 0.16)
        self.assertAlmostEqual(default_density(21, 21), 0.15)
        self.assertAlmostEqual(default_density(8, 6), 0.15)


class PatternValidationTests(unittest.TestCase):
    def test_reports_each_problem(self) -> None:
        wall = [Position(x, 2) for x in range(5)]
        check = validate_pattern(5, 5, wall)
        self.assertFalse(check.ok)
        self.assertIn("White cells are not connected", check.messages)
        self.assertTrue(any("run of length 2" in message for message in check.messages))

    def test_reports_asymmetry(self) -> None:
        check = validate_pattern(7, 7, [Position(0, 0)])
        self.assertIn("Black squares are not 180° symmetric", check.messages)

    def test_out_of_bounds(self) -> None:
        self.assertFalse(validate_pattern(3, 3, [Position(5, 5)]).ok)


if __name__ == "__main__":
    unittest.main()
