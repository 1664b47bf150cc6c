"""Loading of external ``WORD;SCORE`` word lists."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO

from ..core.constants import MAX_WORD_SCORE
from ..core.exceptions import LexiconLoadError
from .normalization import clean_word


@dataclass(frozen=True)
class WordListRecord:
    """One parsed line of a scored word list."""

    word: str
    score: int
    line_number: int


def parse_word_list(lines: Iterable[str], source: str = "<memory>") -> Iterator[WordListRecord]:
    """Yield records from ``WORD;SCORE`` lines.

    Blank lines and ``#`` comments are skipped. Words that normalize to an
    empty string are skipped as well; a missing separator, a non-integer score
    or a score outside ``[0, 100]`` raises :class:`LexiconLoadError`.
    """

    reader = csv.reader(lines, delimiter=";")
    for row in reader:
        line_number = reader.line_num
        if not row or not "".join(row).strip():
            continue
        if row[0].lstrip().startswith("#"):
            continue
        if len(row) != 2:
            raise LexiconLoadError(
                f"{source}:{line_number}: expected WORD;SCORE, got {';'.join(row)!r}"
            )
        raw_word, raw_score = row
        try:
            score = int(raw_score.strip())
        except ValueError as exc:
            raise LexiconLoadError(
                f"{source}:{line_number}: invalid score {raw_score.strip()!r}"
            ) from exc
        if not 0 <= score <= MAX_WORD_SCORE:
            raise LexiconLoadError(
                f"{source}:{line_number}: score {score} outside 0-{MAX_WORD_SCORE}"
            )
        word = clean_word(raw_word)
        if not word:
            continue
        yield WordListRecord(word=word, score=score, line_number=line_number)


def read_word_list(handle: TextIO, source: str = "<stream>") -> List[WordListRecord]:
    return list(parse_word_list(handle, source))


def load_word_list(path: Path | str) -> List[WordListRecord]:
    """Read a word list file from disk."""

    source = Path(path)
    if not source.exists():
        raise LexiconLoadError(f"Missing word list: {source}")
    with source.open("r", encoding="utf-8", newline="") as handle:
        return read_word_list(handle, str(source))


__all__ = ["WordListRecord", "parse_word_list", "read_word_list", "load_word_list"]
