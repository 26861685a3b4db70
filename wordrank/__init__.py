"""Lexicographic rank of a word among the distinct rearrangements of its letters."""

from .ranker import PermutationRanker, RankResult, count_arrangements, rank_word

__version__ = "1.0.0"

__all__ = [
    "PermutationRanker",
    "RankResult",
    "count_arrangements",
    "rank_word",
]
