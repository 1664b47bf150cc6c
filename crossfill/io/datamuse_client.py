"""Lightweight HTTP client for word lookups (Datamuse and Free Dictionary)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from ..data.normalization import clean_word
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class DatamuseAPIError(RuntimeError):
    """Raised when a lookup service cannot be reached or answers badly."""


class DatamuseClient:
    """Synonym, definition and pattern lookups for clue tooling.

    Implements the lexicon's ``WordLookup`` protocol. The grid filler never
    calls it; it is injected only where clue text is prepared.
    """

    DATAMUSE_URL = "https://api.datamuse.com/words"
    FREE_DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/{word}"

    def __init__(self, timeout_seconds: float = 10.0, session: Optional[requests.Session] = None) -> None:
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def find_words(
        self,
        means_like: Optional[str] = None,
        spelled_like: Optional[str] = None,
        max_results: int = 10,
        include_definitions: bool = False,
    ) -> List[Dict[str, Any]]:
        """Query Datamuse and return its raw result objects."""
        params: Dict[str, Any] = {"max": max_results}
        if means_like:
            params["ml"] = means_like
        if spelled_like:
            params["sp"] = spelled_like
        if include_definitions:
            params["md"] = "d"
        try:
            response = self.session.get(
                self.DATAMUSE_URL, params=params, timeout=self.timeout_seconds
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise DatamuseAPIError(f"Datamuse request failed: {exc}") from exc
        except ValueError as exc:
            raise DatamuseAPIError(f"Datamuse returned invalid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise DatamuseAPIError(f"Unexpected Datamuse payload: {data!r}")
        return data

    def synonyms(self, word: str, max_results: int = 10) -> List[str]:
        results = self.find_words(means_like=word.lower(), max_results=max_results)
        return [clean_word(item.get("word", "")) for item in results if item.get("word")]

    def words_by_pattern(self, pattern: str, max_results: int = 50) -> List[str]:
        """Words fitting ``pattern`` where ``?`` stands for any letter."""
        results = self.find_words(spelled_like=pattern.lower(), max_results=max_results)
        words = [clean_word(item.get("word", "")) for item in results]
        return [word for word in words if len(word) == len(pattern)]

    def definition(self, word: str) -> Optional[str]:
        """Return a definition, trying Free Dictionary before Datamuse."""
        text = self._free_dictionary_definition(word)
        if text:
            return text

        results = self.find_words(spelled_like=word.lower(), max_results=1, include_definitions=True)
        for item in results:
            for raw in item.get("defs") or []:
                # Datamuse prefixes definitions with a part-of-speech tag.
                _, _, text = raw.partition("\t")
                if text.strip():
                    return text.strip()
        return None

    def _free_dictionary_definition(self, word: str) -> Optional[str]:
        url = self.FREE_DICTIONARY_URL.format(word=word.lower())
        try:
            response = self.session.get(url, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            LOGGER.warning("Free Dictionary request failed for %s: %s", word, exc)
            return None
        if response.status_code != 200:
            LOGGER.debug("Free Dictionary has no entry for %s (%s)", word, response.status_code)
            return None
        try:
            entries = response.json()
        except ValueError:
            LOGGER.warning("Free Dictionary returned invalid JSON for %s", word)
            return None
        for entry in entries if isinstance(entries, list) else []:
            for meaning in entry.get("meanings") or []:
                for item in meaning.get("definitions") or []:
                    text = item.get("definition")
                    if text:
                        return text
        return None


__all__ = ["DatamuseAPIError", "DatamuseClient"]
