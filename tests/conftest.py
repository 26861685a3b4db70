from __future__ import annotations

from itertools import permutations

import pytest

from wordrank.config import Settings
from wordrank.ranker import PermutationRanker


def brute_force_order(word: str) -> list[str]:
    """Every distinct rearrangement of word, alphabetically (slow but correct)."""
    return sorted({"".join(p) for p in permutations(word)})


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def ranker() -> PermutationRanker:
    return PermutationRanker()
