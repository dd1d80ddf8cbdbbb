"""Runs every candidate word against a lock and keeps the tally."""
from dataclasses import dataclass, field
import logging
from typing import Iterable, Iterator

from padlock_words.core.matcher import alignment_starts
from padlock_words.core.wheels import Lock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordMatch:
    word: str
    starts: tuple[int, ...]  # Start wheel of each alignment, 0-based

    @property
    def alignments(self) -> int:
        return len(self.starts)


@dataclass
class MatchReport:
    """
    Accumulated result of a run.

    `total` is the sum of alignment counts over all matched words, which is
    the number printed in the summary line. A word that lines up twice adds
    two. `distinct_words` counts each matched word once.
    """
    matches: list[WordMatch] = field(default_factory=list)
    total: int = 0

    def add(self, match: WordMatch) -> None:
        self.matches.append(match)
        self.total += match.alignments

    @property
    def words(self) -> list[str]:
        return [m.word for m in self.matches]

    @property
    def distinct_words(self) -> int:
        return len(set(self.words))


class LockSolver:
    def __init__(self, lock: Lock) -> None:
        self._lock = lock
        self.report = MatchReport()

    def solve(self, words: Iterable[str]) -> Iterator[WordMatch]:
        """Yield a WordMatch, in input order, for each word with an alignment."""
        for word in words:
            starts = alignment_starts(self._lock, word)
            if not starts:
                continue
            match = WordMatch(word, tuple(starts))
            logger.debug(f"{word}: {match.alignments} alignment(s) at {list(match.starts)}")
            self.report.add(match)
            yield match
