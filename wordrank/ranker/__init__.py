"""Permutation ranking of words."""

from .alphabet import Alphabet
from .multiset import LetterMultiset
from .permutation_ranker import (
    PermutationRanker,
    RankingState,
    RankResult,
    RankStep,
    count_arrangements,
    rank_word,
)

__all__ = [
    "Alphabet",
    "LetterMultiset",
    "PermutationRanker",
    "RankingState",
    "RankResult",
    "RankStep",
    "count_arrangements",
    "rank_word",
]
