from __future__ import annotations

import math
import string
from concurrent.futures import ThreadPoolExecutor

import pytest

from wordrank import count_arrangements, rank_word
from wordrank.config import Settings
from wordrank.engine import UINT64_MAX
from wordrank.exceptions import InvalidWordError
from wordrank.ranker import PermutationRanker
from wordrank.validation import InputError

from .conftest import brute_force_order


@pytest.mark.parametrize(
    "word, expected",
    [
        ("ABC", 1),
        ("ACB", 2),
        ("BAC", 3),
        ("BCA", 4),
        ("CAB", 5),
        ("CBA", 6),
        ("AAAB", 1),
        ("AABA", 2),
        ("ABAA", 3),
        ("BAAA", 4),
        ("AABB", 1),
        ("BBAA", 6),
        ("BOOKKEEPER", 10743),
        ("QUESTION", 24572),
    ],
)
def test_known_ranks(ranker, word, expected):
    assert ranker.rank(word).rank == expected


def test_single_letter_ranks_first(ranker):
    for letter in "AMZ":
        result = ranker.rank(letter)
        assert result.rank == 1
        assert result.total == 1


@pytest.mark.parametrize("word", ["ZEBRA", "AABBC", "BANANA", "CABBAGE", "ABCDEF"])
def test_matches_brute_force_enumeration(ranker, word):
    ordered = brute_force_order(word)
    assert ranker.rank(word).rank == ordered.index(word) + 1


@pytest.mark.parametrize("letters", ["ABCD", "AABBC", "AAABBB", "ABCCDD"])
def test_consecutive_rearrangements_have_consecutive_ranks(ranker, letters):
    ordered = brute_force_order(letters)
    ranks = [ranker.rank(w).rank for w in ordered]
    assert ranks == list(range(1, len(ordered) + 1))


@pytest.mark.parametrize("word", ["BOOKKEEPER", "MISSISSIPPI", "QUESTION", "ZYZZYVA"])
def test_sorted_is_first_and_descending_is_last(ranker, word):
    ascending = "".join(sorted(word))
    descending = "".join(sorted(word, reverse=True))
    total = ranker.rank(word).total

    assert ranker.rank(ascending).rank == 1
    assert ranker.rank(ascending).is_first
    assert ranker.rank(descending).rank == total
    assert ranker.rank(descending).is_last
    assert 1 <= ranker.rank(word).rank <= total


def test_rank_is_one_only_when_sorted(ranker):
    for word in brute_force_order("ABBC"):
        assert (ranker.rank(word).rank == 1) == (word == "ABBC")


def test_distinct_letters_max_rank_is_factorial(ranker):
    word = "FEDCBA"
    assert ranker.rank(word).rank == math.factorial(6)


def test_repeated_letters_max_rank_within_uint64(ranker):
    word = "B" * 19 + "A" * 6
    result = ranker.rank(word)
    assert result.rank == math.comb(25, 6) == 177100
    assert result.fits_uint64


def test_twenty_distinct_letters_descending(ranker):
    word = string.ascii_uppercase[:20][::-1]
    result = ranker.rank(word)
    assert result.rank == math.factorial(20)
    assert result.fits_uint64


def test_twenty_five_distinct_letters_are_exact(ranker):
    word = string.ascii_uppercase[:25][::-1]
    result = ranker.rank(word)
    assert result.rank == math.factorial(25)
    assert result.rank > UINT64_MAX
    assert not result.fits_uint64


def test_twenty_five_letters_one_swap_from_sorted(ranker):
    word = "BA" + string.ascii_uppercase[2:25]
    assert ranker.rank(word).rank == math.factorial(24) + 1


def test_steps_explain_bca(ranker):
    steps = ranker.rank("BCA").steps
    assert [s.letter for s in steps] == ["B", "C", "A"]
    assert [s.skipped for s in steps] == [["A"], ["A"], []]
    assert [s.penalty for s in steps] == [2, 1, 0]


def test_steps_explain_bookkeeper(ranker):
    result = ranker.rank("BOOKKEEPER")
    assert [s.penalty for s in result.steps] == [0, 8400, 2100, 180, 60, 0, 0, 2, 0, 0]
    assert result.steps[1].skipped == list("EEEKK")
    assert 1 + sum(s.penalty for s in result.steps) == result.rank


def test_custom_alphabet_order():
    reverse = PermutationRanker(string.ascii_uppercase[::-1])
    assert reverse.rank("CBA").rank == 1
    assert reverse.rank("ABC").rank == 6


def test_non_letter_alphabet():
    digits = PermutationRanker("0123456789")
    assert digits.rank("0112").rank == 1
    assert digits.rank("2110").rank == 12


def test_empty_word_is_rejected(ranker):
    with pytest.raises(ValueError):
        ranker.rank("")


def test_calls_do_not_share_state(ranker):
    words = ["BOOKKEEPER", "CBA", "BAAA", "QUESTION", "BBAA"] * 20
    expected = [ranker.rank(w).rank for w in words]
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(lambda w: ranker.rank(w).rank, words)) == expected


def test_rank_word_validates_first():
    assert rank_word("BOOKKEEPER") == 10743
    with pytest.raises(InvalidWordError) as exc_info:
        rank_word("bookkeeper")
    assert exc_info.value.errors == InputError.INVALID_CHARACTER


def test_rank_word_respects_settings():
    settings = Settings()
    settings.ranking.max_letters = 3
    assert rank_word("CBA", settings) == 6
    with pytest.raises(InvalidWordError) as exc_info:
        rank_word("DCBA", settings)
    assert InputError.TOO_MANY_LETTERS in exc_info.value.errors


def test_count_arrangements():
    assert count_arrangements("AABB") == 6
    assert count_arrangements("BOOKKEEPER") == 151200
    with pytest.raises(InvalidWordError):
        count_arrangements("")


def test_fresh_state_per_call(ranker):
    state = ranker.new_state("BOOKKEEPER")
    assert state.rank == 1
    assert state.carry == 0
    assert "".join(state.remaining) == "BEEEKKOOPR"
    assert ranker.rank("BOOKKEEPER").rank == ranker.rank("BOOKKEEPER").rank == 10743
