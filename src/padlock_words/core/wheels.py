"""
Wheel and lock model, plus the reader for the wheel configuration file.

TERMINOLOGY:
- Wheel: one rotating ring of the padlock. Each wheel shows a fixed subset
  of the alphabet, stored as 26 membership flags indexed by letter position.
- Lock: the ordered sequence of all wheels, left to right.

FILE FORMAT (wheels.txt):
    <wheel count> <letters per wheel>
    <row of exactly letters-per-wheel letters>   # one row per wheel
    ...

The two counts are whitespace separated tokens and may sit on one line or
two. Letters are case-insensitive. Rows past the declared wheel count are
ignored.
"""
from dataclasses import dataclass
import logging
import string
from typing import Callable, Iterable, Iterator, Optional

from padlock_words.config import lock_config
from padlock_words.core.errors import ConfigurationError, ErrorKind

ALPHABET_LENGTH = lock_config.ALPHABET_LENGTH

logger = logging.getLogger(__name__)


def alphabet_index(letter: str) -> int:
    """Position of a lower case letter in the alphabet, 0-25."""
    return ord(letter) - ord('a')


def is_letter(char: str) -> bool:
    return char in string.ascii_letters


@dataclass(frozen=True)
class Wheel:
    """
    One wheel of the lock.

    Membership is a fixed-size table of flags rather than a set so that a
    letter test is a single index lookup.
    """
    membership: tuple[bool, ...]

    @classmethod
    def from_letters(cls, letters: str) -> 'Wheel':
        flags = [False] * ALPHABET_LENGTH
        for letter in letters:
            if not is_letter(letter):
                raise ValueError(f"{letter!r} is not a letter a-z")
            flags[alphabet_index(letter.lower())] = True
        return cls(tuple(flags))

    def __contains__(self, letter: str) -> bool:
        index = alphabet_index(letter)
        return 0 <= index < ALPHABET_LENGTH and self.membership[index]

    def letters(self) -> str:
        return "".join(string.ascii_lowercase[i] for i, present in enumerate(self.membership) if present)


@dataclass(frozen=True)
class Lock:
    wheels: tuple[Wheel, ...]
    letters_per_wheel: int

    def __len__(self) -> int:
        return len(self.wheels)

    def __getitem__(self, index: int) -> Wheel:
        return self.wheels[index]

    def __iter__(self) -> Iterator[Wheel]:
        return iter(self.wheels)

    @property
    def wheel_count(self) -> int:
        return len(self.wheels)


def _positive_int(token: Optional[str]) -> Optional[int]:
    # Plain decimal digits only; int() would also take "1_0" or non-ASCII digits.
    if token is None or not (token.isascii() and token.isdigit()):
        return None
    value = int(token)
    return value if value > 0 else None


def _read_header(lines: Iterator[str]) -> tuple[int, int]:
    tokens: list[str] = []
    for line in lines:
        tokens.extend(line.split())
        if len(tokens) >= 2:
            break

    wheel_count = _positive_int(tokens[0] if tokens else None)
    if wheel_count is None:
        raise ConfigurationError(
            ErrorKind.INVALID_WHEEL_COUNT,
            "Invalid value for wheel count in wheels.txt. Expecting number greater than 0.")

    letters_per_wheel = _positive_int(tokens[1] if len(tokens) > 1 else None)
    if letters_per_wheel is None or len(tokens) > 2:
        raise ConfigurationError(
            ErrorKind.INVALID_LETTERS_PER_WHEEL,
            "Invalid value for letters per wheel in wheels.txt. Expecting number greater than 0.")

    return wheel_count, letters_per_wheel


def _parse_row(row: str, letters_per_wheel: int, wheel_number: int) -> Wheel:
    if len(row) > letters_per_wheel:
        raise ConfigurationError(
            ErrorKind.TOO_MANY_LETTERS,
            f"Wheel {wheel_number} contained too many letters.")

    for position in range(letters_per_wheel):
        if position >= len(row):
            raise ConfigurationError(
                ErrorKind.INSUFFICIENT_LETTERS,
                f"Wheel {wheel_number} contained insufficient letters.")
        if not is_letter(row[position]):
            raise ConfigurationError(
                ErrorKind.NON_ALPHABETICAL,
                f"Non-alphabetical character found on wheel {wheel_number}. "
                "Ensure only characters a-z or A-Z are used.")

    return Wheel.from_letters(row)


def parse_wheels(lines: Iterable[str]) -> Lock:
    """Parse wheel file lines (line terminators already removed) into a Lock."""
    line_iter = iter(lines)
    wheel_count, letters_per_wheel = _read_header(line_iter)

    wheels = []
    for index in range(wheel_count):
        row = next(line_iter, None)
        if row is None:
            raise ConfigurationError(
                ErrorKind.MISSING_WHEEL,
                f"wheels.txt declares {wheel_count} wheels but only {index} were found.")
        # Wheel numbers in messages are 1-based, as printed on the lock.
        wheels.append(_parse_row(row, letters_per_wheel, index + 1))

    logger.info(f"Read lock with {wheel_count} wheels of {letters_per_wheel} letters")
    return Lock(tuple(wheels), letters_per_wheel)


class WheelReader:
    def __init__(self, open: Callable = open) -> None:
        self._open = open

    def read(self, wheels_file: str = lock_config.WHEELS_PATH) -> Lock:
        try:
            with self._open(wheels_file, "r",
                            encoding=lock_config.FILE_ENCODING, errors=lock_config.FILE_ERRORS) as f:
                lines = [line.rstrip("\r\n") for line in f]
        except OSError as e:
            logger.debug(f"Failed to read {wheels_file}: {e}")
            raise ConfigurationError(
                ErrorKind.UNREADABLE_WHEELS,
                f"Unable to open wheel file. Ensure {wheels_file} is located in the working directory.") from e

        return parse_wheels(lines)
