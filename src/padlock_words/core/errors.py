"""
Fatal errors raised while reading the wheel and dictionary files.

Every error carries an ErrorKind so callers can tell the failures apart
without parsing the message. Words that are merely unusable (non-alphabetic,
longer than the lock) are skipped by the scanner and never raise.
"""
from enum import Enum


class ErrorKind(Enum):
    UNREADABLE_WHEELS = "unreadable wheels"
    INVALID_WHEEL_COUNT = "invalid wheel count"
    INVALID_LETTERS_PER_WHEEL = "invalid letters per wheel"
    MISSING_WHEEL = "missing wheel"
    INSUFFICIENT_LETTERS = "insufficient letters"
    NON_ALPHABETICAL = "non-alphabetical character"
    TOO_MANY_LETTERS = "too many letters"
    UNREADABLE_DICTIONARY = "unreadable dictionary"
    WORD_TOO_LONG = "word exceeds maximum length"


class PadlockError(Exception):
    """Base class for errors that abort a run."""
    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PadlockError):
    """The wheel file is missing or malformed. Raised before any matching."""


class DictionaryError(PadlockError):
    """The dictionary could not be read to the end."""
