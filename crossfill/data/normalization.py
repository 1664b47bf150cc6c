"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

from ..core.constants import UNKNOWN, WILDCARDS

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``."""

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", stripped.upper())


def clean_pattern(pattern: str) -> str:
    """Upper-case ``pattern`` and map every wildcard spelling to ``UNKNOWN``."""

    return "".join(UNKNOWN if char in WILDCARDS else char for char in pattern.upper())


__all__ = ["clean_word", "clean_pattern"]
