import unittest
from unittest.mock import MagicMock

from crossfill.core.constants import Difficulty, FillStrategy
from crossfill.core.exceptions import SearchExhausted, ValidationError
from crossfill.data.lexicon import Lexicon, LexiconConfig
from crossfill.engine.generator import CrosswordGenerator, GeneratorConfig
from crossfill.engine.validator import ValidationResult


def open_config(**overrides) -> GeneratorConfig:
    options = dict(width=3, height=3, seed=11, density=0.0, attempt_timeout_seconds=10.0)
    options.update(overrides)
    return GeneratorConfig(**options)


class GeneratorConfigTests(unittest.TestCase):
    def test_from_preset(self) -> None:
        config = GeneratorConfig.from_preset("mini", seed=3)
        self.assertEqual((config.width, config.height), (5, 5))
        self.assertAlmostEqual(config.density, 0.12)
        self.assertEqual(config.seed, 3)

    def test_unknown_preset(self) -> None:
        with self.assertRaises(ValueError):
            GeneratorConfig.from_preset("jumbo")

    def test_difficulty_sets_density(self) -> None:
        self.assertEqual(open_config(density=None, difficulty=Difficulty.HARD).black_density(), 0.10)
        self.assertEqual(open_config(density=None, difficulty="expert").black_density(), 0.12)
        self.assertEqual(open_config(density=0.2, difficulty=Difficulty.EASY).black_density(), 0.2)
        self.assertIsNone(open_config(density=None).black_density())

    def test_preset_difficulty_replaces_preset_density(self) -> None:
        config = GeneratorConfig.from_preset("daily", difficulty=Difficulty.EASY)
        self.assertIsNone(config.density)
        self.assertEqual(config.black_density(), 0.06)
        self.assertEqual(GeneratorConfig.from_preset("daily").black_density(), 0.16)

    def test_to_fill_config(self) -> None:
        config = open_config(
            max_retries=4,
            use_arc_consistency=False,
            prefer_quality=True,
            strategy=FillStrategy.CPSAT,
        )
        fill = config.to_fill_config()
        self.assertEqual(fill.max_retries, 4)
        self.assertEqual(fill.attempt_timeout_seconds, 10.0)
        self.assertFalse(fill.use_arc_consistency)
        self.assertTrue(fill.prefer_quality)
        self.assertEqual(fill.strategy, FillStrategy.CPSAT)


class CrosswordGeneratorTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.lexicon = Lexicon()

    def test_generate_returns_validated_result(self) -> None:
        result = CrosswordGenerator(self.lexicon, open_config()).generate()
        self.assertEqual(result.seed, 11)
        self.assertEqual(result.black_squares, [])
        self.assertEqual(result.validation_messages, [])
        self.assertEqual(len(result.filled.slots), 6)
        self.assertGreaterEqual(result.elapsed_seconds, 0.0)

    def test_generation_is_reproducible(self) -> None:
        first = CrosswordGenerator(self.lexicon, open_config()).generate()
        second = CrosswordGenerator(self.lexicon, open_config()).generate()
        self.assertEqual(first.filled.row_strings(), second.filled.row_strings())

    def test_seed_override(self) -> None:
        result = CrosswordGenerator(self.lexicon, open_config()).generate(seed_override=99)
        self.assertEqual(result.seed, 99)
        self.assertEqual(result.filled.seed, 99)

    def test_validation_failure_is_raised_and_logged(self) -> None:
        generator = CrosswordGenerator(self.lexicon, open_config())
        generator.validator = MagicMock()
        generator.validator.validate.return_value = ValidationResult(ok=False, messages=["boom"])
        with self.assertLogs("crossfill.engine.generator", level="ERROR"):
            with self.assertRaises(ValidationError):
                generator.generate()

    def test_fill_failures_propagate(self) -> None:
        lexicon = Lexicon(LexiconConfig(include_base_words=False), words={"CAT": 50, "XYZ": 50})
        with self.assertRaises(SearchExhausted):
            CrosswordGenerator(lexicon, open_config()).generate()

    def test_batch_runs_independent_seeds(self) -> None:
        batch = CrosswordGenerator(self.lexicon, open_config()).generate_batch(3, workers=2)
        self.assertEqual(len(batch.results) + len(batch.errors), 3)
        self.assertAlmostEqual(batch.success_rate, len(batch.results) / 3)
        seeds = [result.seed for result in batch.results] + [seed for seed, _ in batch.errors]
        self.assertEqual(len(set(seeds)), 3)
        if batch.results:
            self.assertIn(batch.best, batch.results)
            best_score = batch.best.filled.average_score()
            self.assertTrue(all(r.filled.average_score() <= best_score for r in batch.results))

    def test_batch_collects_errors(self) -> None:
        lexicon = Lexicon(LexiconConfig(include_base_words=False), words={"CAT": 50, "XYZ": 50})
        batch = CrosswordGenerator(lexicon, open_config()).generate_batch(2, workers=2)
        self.assertEqual(batch.results, [])
        self.assertEqual(len(batch.errors), 2)
        self.assertEqual(batch.success_rate, 0.0)
        self.assertIsNone(batch.best)

    def test_batch_size_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            CrosswordGenerator(self.lexicon, open_config()).generate_batch(0)


if __name__ == "__main__":
    unittest.main()
