"""
Keysmith Errors
================

Exception hierarchy for the generators. Each concrete error carries a
closed :class:`ErrorKind` tag plus the structured details of the violated
precondition, so callers can branch without matching message text.

Analysis functions never raise on empty or malformed passwords; apart
from generation requests, only loading a configured pattern corpus can
fail.
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """Closed set of failure kinds."""

    EMPTY_ALPHABET = "empty_alphabet"
    INVALID_WORD_COUNT = "invalid_word_count"
    ENTROPY_UNAVAILABLE = "entropy_unavailable"
    CORPUS_UNAVAILABLE = "corpus_unavailable"


class KeysmithError(Exception):
    """Base class for every error raised by Keysmith."""

    kind: ErrorKind


class EmptyAlphabetError(KeysmithError, ValueError):
    """No character class enabled, or the exclusions emptied the pool.

    Raised before any random draw takes place.
    """

    kind = ErrorKind.EMPTY_ALPHABET

    def __init__(self, reason: str = "no character class enabled") -> None:
        self.reason = reason
        super().__init__(f"Character pool is empty: {reason}")


class InvalidWordCountError(KeysmithError, ValueError):
    """Passphrase word count outside the supported range."""

    kind = ErrorKind.INVALID_WORD_COUNT

    def __init__(self, word_count: int, minimum: int = 4, maximum: int = 8) -> None:
        self.word_count = word_count
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Word count must be between {minimum} and {maximum}")


class EntropyUnavailableError(KeysmithError, RuntimeError):
    """The operating system's secure random generator failed.

    Fatal: Keysmith never falls back to a non-cryptographic generator.
    """

    kind = ErrorKind.ENTROPY_UNAVAILABLE


class CorpusUnavailableError(KeysmithError, RuntimeError):
    """The pattern corpus file could not be read or parsed."""

    kind = ErrorKind.CORPUS_UNAVAILABLE

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load pattern corpus {path}: {reason}")
