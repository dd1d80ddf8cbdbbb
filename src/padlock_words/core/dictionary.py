import logging
from collections import Counter
from typing import Callable, Iterator, Optional

from padlock_words.config import lock_config
from padlock_words.core.errors import DictionaryError, ErrorKind
from padlock_words.core.wheels import is_letter

logger = logging.getLogger(__name__)

# Skip reasons, also used as keys in Dictionary.skipped
SKIP_BLANK = "blank"
SKIP_NON_ALPHABETICAL = "non-alphabetical"
SKIP_TOO_LONG_FOR_LOCK = "longer than lock"
SKIP_OVER_LENGTH_LINE = "over-length line"


class Dictionary:
    """
    Streams candidate words out of a one-word-per-line file.

    Only words that could possibly be dialled on a lock with `wheel_count`
    wheels are yielded, lower-cased. Unusable words are skipped and tallied
    in `skipped`; a line longer than `max_word_length` is fatal unless
    `skip_long_lines` is set.
    """
    def __init__(
        self,
        wheel_count: int,
        max_word_length: int = lock_config.MAX_WORD_LENGTH,
        skip_long_lines: bool = False,
        open: Callable = open
    ) -> None:
        self._open = open
        self._wheel_count = wheel_count
        self._max_word_length = max_word_length
        self._skip_long_lines = skip_long_lines
        self.skipped: Counter[str] = Counter()

    def _check_line_length(self, line: str, line_number: int) -> bool:
        if len(line) <= self._max_word_length:
            return True
        if self._skip_long_lines:
            self.skipped[SKIP_OVER_LENGTH_LINE] += 1
            return False
        raise DictionaryError(
            ErrorKind.WORD_TOO_LONG,
            f"Word in dictionary exceeded maximum length on line {line_number}!")

    def candidate(self, line: str) -> Optional[str]:
        """Return the lower-cased word on `line` or None if it can never match."""
        word = line.strip()
        if not word:
            self.skipped[SKIP_BLANK] += 1
            return None
        # Validate before folding: some non-ASCII letters lower-case to a-z.
        if not all(is_letter(c) for c in word):
            self.skipped[SKIP_NON_ALPHABETICAL] += 1
            return None
        word = word.lower()
        # A word longer than the lock can never be a combination.
        if len(word) > self._wheel_count:
            self.skipped[SKIP_TOO_LONG_FOR_LOCK] += 1
            return None
        return word

    def words(self, dictionary_file: str = lock_config.DICTIONARY_PATH) -> Iterator[str]:
        try:
            f = self._open(dictionary_file, "r",
                           encoding=lock_config.FILE_ENCODING, errors=lock_config.FILE_ERRORS)
        except OSError as e:
            logger.debug(f"Failed to open {dictionary_file}: {e}")
            raise DictionaryError(
                ErrorKind.UNREADABLE_DICTIONARY,
                f"Unable to open dictionary file. Ensure {dictionary_file} is located in the working directory.") from e

        with f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not self._check_line_length(line, line_number):
                    continue
                word = self.candidate(line)
                if word is not None:
                    yield word

        if self.skipped:
            logger.info(f"Skipped dictionary entries: {dict(self.skipped)}")
