"""Unit tests for sliding words along the lock."""
import pytest

from padlock_words.core.matcher import alignment_starts, count_alignments
from tests.fixtures.lock_helpers import AB_LOCK, CAT_LOCK, FULL_LOCK, create_test_lock


def test_every_start_position_is_counted():
    lock = create_test_lock(AB_LOCK)
    # Every wheel carries both letters, so "ab" lines up at both starts.
    assert alignment_starts(lock, "ab") == [0, 1]
    assert count_alignments(lock, "ab") == 2


def test_only_matching_starts_are_counted():
    lock = create_test_lock(["ab", "b", "a"])
    assert alignment_starts(lock, "ab") == [0]
    assert alignment_starts(lock, "aa") == []
    assert alignment_starts(lock, "ba") == [1]
    assert alignment_starts(lock, "bb") == [0]


@pytest.mark.parametrize("word,expected", [("a", 3), ("zq", 2), ("cat", 1)])
def test_full_alphabet_lock(word, expected):
    lock = create_test_lock(FULL_LOCK)
    assert count_alignments(lock, word) == expected


@pytest.mark.parametrize("word,starts", [
    ("cat", [0]),
    ("bet", [0]),
    ("ats", [1]),
    ("at", [1]),
    ("cats", [0]),
    ("dogs", [0]),
    ("cot", [0]),
    ("zoo", []),
    ("tac", []),
])
def test_cat_lock(word, starts):
    lock = create_test_lock(CAT_LOCK)
    assert alignment_starts(lock, word) == starts


def test_word_as_long_as_lock_has_one_start():
    lock = create_test_lock(CAT_LOCK)
    assert count_alignments(lock, "bots") == 1
    assert count_alignments(lock, "bott") == 0


def test_word_longer_than_lock_is_rejected():
    lock = create_test_lock(AB_LOCK)
    with pytest.raises(ValueError):
        count_alignments(lock, "abab")


def test_count_stays_within_possible_starts():
    lock = create_test_lock(["abc", "bcd", "cde", "abc", "bcd"])
    for word in ["a", "b", "c", "bc", "cd", "bcd", "abcab", "cccc", "e"]:
        count = count_alignments(lock, word)
        assert 0 <= count <= len(lock) - len(word) + 1


def test_case_is_ignored():
    lock = create_test_lock(CAT_LOCK)
    assert count_alignments(lock, "CAT") == count_alignments(lock, "cat") == 1
    assert alignment_starts(lock, "aTs") == [1]
