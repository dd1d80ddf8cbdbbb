"""
Slides a word along the lock and finds every alignment that spells it.

An alignment is a start wheel `i` such that word[j] is on wheel i+j for
every letter j. Each start position is scanned left to right and abandoned
at the first letter missing from its wheel.
"""
from padlock_words.core.wheels import Lock


def _spells_at(lock: Lock, word: str, start: int) -> bool:
    for offset, letter in enumerate(word):
        if letter not in lock[start + offset]:
            return False
    return True


def alignment_starts(lock: Lock, word: str) -> list[int]:
    """
    Return every start wheel index at which `word` can be dialled.

    Letters are matched case-insensitively. All start positions are tested,
    not just the first hit, because a word may line up more than once.
    """
    word = word.lower()
    # How many more wheels there are than letters in the word.
    space = len(lock) - len(word)
    if space < 0:
        raise ValueError(f"'{word}' is longer than the {len(lock)} wheel lock")
    return [start for start in range(space + 1) if _spells_at(lock, word, start)]


def count_alignments(lock: Lock, word: str) -> int:
    return len(alignment_starts(lock, word))
