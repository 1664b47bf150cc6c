"""CLI entrypoint for the crossword grid filler."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import List, Optional

from crossfill.core.constants import DIFFICULTY_DENSITY, SIZE_PRESETS, Difficulty, FillStrategy
from crossfill.core.exceptions import CrosswordError
from crossfill.data.lexicon import Lexicon, LexiconConfig
from crossfill.engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig
from crossfill.engine.patterns import PatternGenerator, positions_to_rows, validate_pattern
from crossfill.engine.validator import SolutionValidator
from crossfill.io.export import batch_paths, dump_filled_grid, iter_grid_files, load_filled_grid
from crossfill.utils.logger import configure_logging, get_logger, parse_level
from crossfill.utils.pretty import print_fill_stats

LOGGER = get_logger("crossfill.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fill crossword grids from a scored word list")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate and fill a grid")
    generate.add_argument(
        "--size",
        choices=sorted(SIZE_PRESETS),
        help="Size preset (overrides --width/--height)",
    )
    generate.add_argument("--width", type=int, default=5, help="Grid width in cells")
    generate.add_argument("--height", type=int, default=5, help="Grid height in cells")
    generate.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    generate.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        help="Black-square density by difficulty (overrides the size preset density)",
    )
    generate.add_argument("--min-score", type=int, default=30, help="Minimum word score (0-100)")
    generate.add_argument("--wordlist", type=Path, help="Extra WORD;SCORE word list to merge")
    generate.add_argument(
        "--no-base-words",
        action="store_true",
        help="Do not load the built-in curated word table",
    )
    generate.add_argument("--timeout", type=float, default=30.0, help="Seconds per fill attempt")
    generate.add_argument("--retries", type=int, default=10, help="Fill attempts before giving up")
    generate.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in FillStrategy],
        default=FillStrategy.BACKTRACKING.value,
        help="Search backend",
    )
    generate.add_argument("--no-ac3", action="store_true", help="Skip the arc-consistency pre-pass")
    generate.add_argument(
        "--prefer-quality",
        action="store_true",
        help="Try higher-scoring words first instead of a pure shuffle",
    )
    generate.add_argument("--batch", type=int, default=1, help="Number of independent grids")
    generate.add_argument("--workers", type=int, default=4, help="Worker threads for --batch")
    generate.add_argument("--output", type=Path, help="Optional path to JSON output")
    generate.add_argument("--pretty", action="store_true", help="Print the grid and statistics")

    validate = commands.add_parser("validate", help="Validate filled grid JSON files")
    validate.add_argument("--input", type=Path, required=True, help="JSON file or directory")

    pattern = commands.add_parser("pattern", help="Print a black-square layout")
    pattern.add_argument("--size", choices=sorted(SIZE_PRESETS), help="Size preset")
    pattern.add_argument("--width", type=int, default=15, help="Grid width in cells")
    pattern.add_argument("--height", type=int, default=15, help="Grid height in cells")
    pattern.add_argument("--seed", type=int, default=None, help="Random seed")
    pattern.add_argument("--density", type=float, default=None, help="Black-square density target")
    pattern.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        help="Black-square density by difficulty when --density is not given",
    )
    pattern.add_argument(
        "--random",
        action="store_true",
        help="Skip curated layouts and generate a random one",
    )
    return parser


def _build_lexicon(args: argparse.Namespace) -> Lexicon:
    config = LexiconConfig(path=args.wordlist, include_base_words=not args.no_base_words)
    lexicon = Lexicon(config)
    LOGGER.info("Lexicon ready with %d words", len(lexicon))
    return lexicon


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    options = dict(
        seed=args.seed,
        min_word_score=args.min_score,
        max_retries=args.retries,
        attempt_timeout_seconds=args.timeout,
        use_arc_consistency=not args.no_ac3,
        prefer_quality=args.prefer_quality,
        strategy=FillStrategy(args.strategy),
        difficulty=Difficulty(args.difficulty) if args.difficulty else None,
    )
    if args.size:
        return GeneratorConfig.from_preset(args.size, **options)
    return GeneratorConfig(width=args.width, height=args.height, **options)


def _emit(result: CrosswordResult, output: Optional[Path], pretty: bool, lexicon: Lexicon) -> None:
    if pretty:
        print_fill_stats(result, lexicon)
    if output:
        dump_filled_grid(result.filled, output)
        LOGGER.info("Wrote %s", output)
    elif not pretty:
        print(json.dumps(result.filled.to_jsonable(), indent=2))


def run_generate(args: argparse.Namespace) -> int:
    lexicon = _build_lexicon(args)
    generator = CrosswordGenerator(lexicon, _build_config(args))

    if args.batch <= 1:
        try:
            result = generator.generate()
        except CrosswordError as exc:
            LOGGER.error("Generation failed: %s", exc)
            return 1
        _emit(result, args.output, args.pretty, lexicon)
        return 0

    batch = generator.generate_batch(args.batch, args.workers)
    paths = dict(batch_paths(args.output, len(batch.results))) if args.output else {}
    for index, result in enumerate(batch.results, start=1):
        _emit(result, paths.get(index), args.pretty, lexicon)
    LOGGER.info(
        "Batch success rate %.0f%% (%d failed)", batch.success_rate * 100, len(batch.errors)
    )
    if batch.best is not None:
        LOGGER.info(
            "Best grid: seed %s, average score %.1f",
            batch.best.seed,
            batch.best.filled.average_score(),
        )
    return 0 if batch.results else 1


def run_validate(args: argparse.Namespace) -> int:
    validator = SolutionValidator()
    files = list(iter_grid_files(args.input))
    if not files:
        LOGGER.error("No JSON files found at %s", args.input)
        return 1

    invalid = 0
    for path in files:
        try:
            filled = load_filled_grid(path)
        except CrosswordError as exc:
            print(f"{path}: unreadable ({exc})")
            invalid += 1
            continue
        result = validator.validate(filled)
        if result.ok:
            print(f"{path}: OK ({len(filled.slots)} words)")
            continue
        invalid += 1
        print(f"{path}: INVALID")
        for message in result.messages:
            print(f"  - {message}")
    print(f"{len(files) - invalid}/{len(files)} valid")
    return 1 if invalid else 0


def run_pattern(args: argparse.Namespace) -> int:
    width, height, density = args.width, args.height, args.density
    if args.size:
        preset = SIZE_PRESETS[args.size]
        width, height = preset.width, preset.height
        if density is None and not args.difficulty:
            density = preset.density
    if density is None and args.difficulty:
        density = DIFFICULTY_DENSITY[Difficulty(args.difficulty)]
    generator = PatternGenerator(random.Random(args.seed))
    black_squares = generator.generate(width, height, density=density, use_curated=not args.random)
    for row in positions_to_rows(width, height, black_squares):
        print(row)
    check = validate_pattern(width, height, black_squares)
    print(f"{len(black_squares)} black squares, {'valid' if check.ok else 'invalid'}")
    return 0 if check.ok else 1


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        level = parse_level(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(level)

    if args.command == "generate":
        if args.batch > 1 and args.workers < 1:
            parser.error("--workers must be at least 1")
        return run_generate(args)
    if args.command == "validate":
        return run_validate(args)
    return run_pattern(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
