"""Crossword generation pipeline.

One generation runs three steps:
  1. Layout: pick a symmetric, connected black-square pattern.
  2. Fill: run the grid filler (backtracking or CP-SAT) with retries.
  3. Validate: re-check the filled grid structurally before returning it.

Batches run independent generations with different seeds in worker threads.
The lexicon is shared between workers and only read.
"""

from __future__ import annotations

import random
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..core.constants import (
    DEFAULT_MIN_WORD_SCORE,
    DIFFICULTY_DENSITY,
    SIZE_PRESETS,
    Difficulty,
    FillStrategy,
)
from ..core.exceptions import CrosswordError, ValidationError
from ..core.models import FilledGrid, GridSpec, Position, ThemeEntry
from ..data.lexicon import Lexicon
from ..utils.logger import get_logger
from .patterns import PatternGenerator
from .solver import FillConfig, GridFiller
from .validator import SolutionValidator

LOGGER = get_logger(__name__)

SEED_LIMIT = 2**31


@dataclass
class GeneratorConfig:
    width: int
    height: int
    seed: Optional[int] = None
    min_word_score: int = DEFAULT_MIN_WORD_SCORE
    density: Optional[float] = None
    difficulty: Optional[Difficulty] = None
    use_curated_layouts: bool = True
    max_retries: int = 10
    attempt_timeout_seconds: float = 30.0
    use_arc_consistency: bool = True
    prefer_quality: bool = False
    strategy: FillStrategy = FillStrategy.BACKTRACKING
    theme_entries: Sequence[ThemeEntry] = field(default_factory=list)

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "GeneratorConfig":
        try:
            preset = SIZE_PRESETS[name]
        except KeyError as exc:
            raise ValueError(
                f"Unknown size preset {name!r}; choose from {', '.join(SIZE_PRESETS)}"
            ) from exc
        if overrides.get("difficulty") is None:
            overrides.setdefault("density", preset.density)
        return cls(width=preset.width, height=preset.height, **overrides)

    def black_density(self) -> Optional[float]:
        """Explicit density first, then the difficulty's, else None for the size default."""

        if self.density is not None:
            return self.density
        if self.difficulty is not None:
            return DIFFICULTY_DENSITY[Difficulty(self.difficulty)]
        return None

    def to_fill_config(self) -> FillConfig:
        return FillConfig(
            max_retries=self.max_retries,
            attempt_timeout_seconds=self.attempt_timeout_seconds,
            use_arc_consistency=self.use_arc_consistency,
            prefer_quality=self.prefer_quality,
            strategy=self.strategy,
        )


@dataclass
class CrosswordResult:
    filled: FilledGrid
    black_squares: List[Position]
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None
    elapsed_seconds: float = 0.0


@dataclass
class BatchResult:
    results: List[CrosswordResult]
    errors: List[Tuple[int, str]]
    success_rate: float
    best: Optional[CrosswordResult] = None


class CrosswordGenerator:
    """Build filled, validated grids from a lexicon."""

    def __init__(self, lexicon: Lexicon, config: GeneratorConfig) -> None:
        self.lexicon = lexicon
        self.config = config
        self.validator = SolutionValidator()

    def generate(self, seed_override: Optional[int] = None) -> CrosswordResult:
        seed = seed_override if seed_override is not None else self.config.seed
        if seed is None:
            seed = random.randrange(SEED_LIMIT)
        started = time.monotonic()

        layout_rng = random.Random(seed)
        black_squares = PatternGenerator(layout_rng).generate(
            self.config.width,
            self.config.height,
            density=self.config.black_density(),
            use_curated=self.config.use_curated_layouts,
        )
        spec = GridSpec(
            width=self.config.width,
            height=self.config.height,
            black_squares=black_squares,
            theme_entries=list(self.config.theme_entries),
            min_word_score=self.config.min_word_score,
        )
        LOGGER.info(
            "Generating %dx%d grid with %d black squares (seed=%s)",
            spec.width,
            spec.height,
            len(black_squares),
            seed,
        )

        filled = GridFiller(self.lexicon, self.config.to_fill_config()).fill(spec, seed=seed)
        validation = self.validator.validate(filled)
        if not validation.ok:
            for message in validation.messages:
                LOGGER.error("Validation failed: %s", message)
            raise ValidationError("; ".join(validation.messages))

        elapsed = time.monotonic() - started
        LOGGER.info(
            "Generated grid in %.2fs (average word score %.1f)", elapsed, filled.average_score()
        )
        return CrosswordResult(
            filled=filled,
            black_squares=black_squares,
            validation_messages=validation.messages,
            seed=seed,
            elapsed_seconds=elapsed,
        )

    def generate_batch(self, count: int, workers: int = 4) -> BatchResult:
        """Run ``count`` independent generations across ``workers`` threads."""

        if count <= 0:
            raise ValueError("Batch size must be positive")
        seed_rng = random.Random(self.config.seed)
        seeds = [seed_rng.randrange(SEED_LIMIT) for _ in range(count)]

        results: List[CrosswordResult] = []
        errors: List[Tuple[int, str]] = []
        with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
            futures = {executor.submit(self.generate, seed): seed for seed in seeds}
            for future in as_completed(futures):
                seed = futures[future]
                try:
                    results.append(future.result())
                except CrosswordError as exc:
                    LOGGER.warning("Batch attempt with seed %s failed: %s", seed, exc)
                    errors.append((seed, str(exc)))

        results.sort(key=lambda result: seeds.index(result.seed))
        errors.sort(key=lambda item: seeds.index(item[0]))
        best = max(results, key=lambda result: result.filled.average_score(), default=None)
        success_rate = len(results) / count
        LOGGER.info("Batch finished: %d/%d succeeded", len(results), count)
        return BatchResult(results=results, errors=errors, success_rate=success_rate, best=best)


__all__ = ["BatchResult", "CrosswordGenerator", "CrosswordResult", "GeneratorConfig"]
