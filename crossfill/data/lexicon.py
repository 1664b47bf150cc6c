"""Scored word dictionary with positional pattern matching."""

from __future__ import annotations

import threading
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Set, Tuple

from ..core.constants import DEFAULT_WORD_SCORE, MAX_WORD_SCORE, MIN_WORD_LENGTH, UNKNOWN
from ..core.exceptions import LookupUnavailableError
from ..core.models import ScoredWord
from ..utils.logger import get_logger
from .base_words import CROSSWORDESE, base_word_scores
from .normalization import clean_pattern, clean_word
from .wordlist_io import load_word_list

LOGGER = get_logger(__name__)


class WordLookup(Protocol):
    """Network-backed helper used by downstream clue tooling."""

    def synonyms(self, word: str, max_results: int = 10) -> List[str]:
        ...

    def definition(self, word: str) -> Optional[str]:
        ...


@dataclass
class LexiconConfig:
    """Configuration for lexicon loading and filtering."""

    path: Path | str | None = None
    include_base_words: bool = True
    default_score: int = DEFAULT_WORD_SCORE
    min_length: int = MIN_WORD_LENGTH
    max_length: int = 21
    min_score: int = 0


class Lexicon:
    """Upper-case word -> score mapping answering wildcard pattern queries.

    The lexicon is mutable while it is being populated; once handed to the
    filler it is treated as a read-only snapshot and may be shared between
    worker threads.
    """

    def __init__(
        self,
        config: Optional[LexiconConfig] = None,
        words: Optional[Mapping[str, int]] = None,
        lookup: Optional[WordLookup] = None,
    ) -> None:
        self.config = config or LexiconConfig()
        self._lookup = lookup
        self._lock = threading.RLock()
        self._scores: Dict[str, int] = {}
        self._overused: Set[str] = set(CROSSWORDESE)
        # Positional index: length -> (position, letter) -> set of words
        self._position_index: Dict[int, Dict[Tuple[int, str], Set[str]]] = defaultdict(
            lambda: defaultdict(set)
        )
        self._words_by_length: Dict[int, Set[str]] = defaultdict(set)

        if self.config.include_base_words:
            self.load_words(base_word_scores().items())
        if self.config.path is not None:
            self.load_file(self.config.path)
        if words:
            self.load_words(words.items())

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_file(self, path: Path | str) -> int:
        records = load_word_list(path)
        added = self.load_words((record.word, record.score) for record in records)
        LOGGER.info("Loaded %d words from %s", added, path)
        return added

    def load_words(self, items: Iterable[Tuple[str, int]]) -> int:
        """Merge ``(word, score)`` pairs, keeping later scores on duplicates.

        Words outside the configured length range or below ``min_score`` are
        skipped; a score outside 0-100 raises ``ValueError``. Returns the
        number of accepted pairs.
        """

        added = 0
        with self._lock:
            for raw, score in items:
                if not 0 <= score <= MAX_WORD_SCORE:
                    raise ValueError(f"Score {score} for {raw!r} outside 0-{MAX_WORD_SCORE}")
                word = clean_word(raw)
                if not self.config.min_length <= len(word) <= self.config.max_length:
                    continue
                if score < self.config.min_score:
                    continue
                self._store(word, int(score))
                added += 1
        return added

    def add_word(self, word: str, score: int) -> None:
        if not 0 <= score <= MAX_WORD_SCORE:
            raise ValueError(f"Score {score} outside 0-{MAX_WORD_SCORE}")
        cleaned = clean_word(word)
        if not cleaned:
            raise ValueError(f"{word!r} contains no letters")
        with self._lock:
            self._store(cleaned, score)

    def _store(self, word: str, score: int) -> None:
        if word not in self._scores:
            length_index = self._position_index[len(word)]
            for pos, char in enumerate(word):
                length_index[(pos, char)].add(word)
            self._words_by_length[len(word)].add(word)
        self._scores[word] = score

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def score(self, word: str) -> int:
        """Return the stored score, or the default score for unknown words."""

        return self._scores.get(clean_word(word), self.config.default_score)

    def contains(self, word: str) -> bool:
        return clean_word(word) in self._scores

    __contains__ = contains

    def is_overused(self, word: str) -> bool:
        return clean_word(word) in self._overused

    def word_count(self) -> int:
        return len(self._scores)

    __len__ = word_count

    def words_of_length(self, length: int) -> List[str]:
        with self._lock:
            return sorted(self._words_by_length.get(length, ()))

    def top_words(self, length: int, limit: int = 10) -> List[ScoredWord]:
        return self.match_pattern(UNKNOWN * length)[:limit]

    def match_pattern(self, pattern: str, min_score: int = 0) -> List[ScoredWord]:
        """Return words fitting ``pattern`` with score >= ``min_score``.

        ``?`` and ``_`` match any letter. Results are sorted by score
        descending, then alphabetically.
        """

        normalized = clean_pattern(pattern)
        with self._lock:
            matching = self._index_lookup(normalized)
            words = [
                ScoredWord(word, self._scores[word])
                for word in matching
                if self._scores[word] >= min_score
            ]
        words.sort(key=lambda item: (-item.score, item.word))
        return words

    def _index_lookup(self, pattern: str) -> Set[str]:
        """Use positional index to find matching words via set intersection."""
        length_index = self._position_index.get(len(pattern))
        if not length_index:
            return set()

        constraints: List[Set[str]] = []
        for pos, letter in enumerate(pattern):
            if letter == UNKNOWN:
                continue
            match_set = length_index.get((pos, letter))
            if not match_set:
                return set()
            constraints.append(match_set)

        if not constraints:
            return set(self._words_by_length.get(len(pattern), set()))

        # Intersect smallest sets first
        constraints.sort(key=len)
        result = set(constraints[0])
        for other in constraints[1:]:
            result &= other
            if not result:
                break
        return result

    # ------------------------------------------------------------------
    # Optional lookups for clue tooling
    # ------------------------------------------------------------------
    def synonyms(self, word: str, max_results: int = 10) -> List[str]:
        if self._lookup is None:
            raise LookupUnavailableError("No word lookup configured")
        return self._lookup.synonyms(clean_word(word), max_results)

    def definition(self, word: str) -> Optional[str]:
        if self._lookup is None:
            raise LookupUnavailableError("No word lookup configured")
        return self._lookup.definition(clean_word(word))


__all__ = ["Lexicon", "LexiconConfig", "WordLookup"]
