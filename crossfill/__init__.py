"""Crossword grid filling engine.

This package exposes the public API surface via:

- ``crossfill.engine.generator.CrosswordGenerator``: layout, fill and validation.
- ``crossfill.engine.solver.GridFiller``: fills a fixed ``GridSpec`` with retries.
- ``crossfill.data.lexicon.Lexicon``: scored words with wildcard pattern matching.
"""

from .core.constants import SIZE_PRESETS, Difficulty, Direction, FillStrategy
from .core.exceptions import (
    CrosswordError,
    FillError,
    PreconditionFailure,
    SearchExhausted,
    SearchTimeout,
    ValidationError,
)
from .core.models import FilledGrid, GridSpec, Position, ThemeEntry
from .data.lexicon import Lexicon, LexiconConfig
from .engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig
from .engine.solver import FillConfig, GridFiller
from .engine.validator import SolutionValidator

__all__ = [
    "CrosswordError",
    "CrosswordGenerator",
    "CrosswordResult",
    "Difficulty",
    "Direction",
    "FillConfig",
    "FillError",
    "FillStrategy",
    "FilledGrid",
    "GeneratorConfig",
    "GridFiller",
    "GridSpec",
    "Lexicon",
    "LexiconConfig",
    "Position",
    "PreconditionFailure",
    "SIZE_PRESETS",
    "SearchExhausted",
    "SearchTimeout",
    "SolutionValidator",
    "ThemeEntry",
    "ValidationError",
]

__version__ = "0.1.0"
