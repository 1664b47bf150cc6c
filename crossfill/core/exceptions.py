"""Custom exception hierarchy for grid filling."""


class CrosswordError(Exception):
    """Base exception for grid filler failures."""


class LexiconLoadError(CrosswordError):
    """Raised when a scored word list cannot be parsed."""


class LookupUnavailableError(CrosswordError):
    """Raised when a word lookup is requested but none was injected."""


class ValidationError(CrosswordError):
    """Raised when a produced grid fails the structural integrity checks."""


class FillError(CrosswordError):
    """Base class for the expected, non-fatal fill outcomes."""


class PreconditionFailure(FillError):
    """Raised when a slot has no candidate words before search starts."""


class SearchExhausted(FillError):
    """Raised when the whole search space was explored without a fill."""


class SearchTimeout(FillError):
    """Raised when an attempt exceeds its wall-clock budget."""
