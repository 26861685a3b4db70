"""Lexicographic rank of a word among the distinct rearrangements of its letters.

The word is compared position by position with its alphabetized letters.
Every letter that sorts before the word's letter at a position could have
started a smaller rearrangement of the remaining suffix, so each one adds
the number of distinct arrangements of that suffix to the rank:

    (m - 1)! / (r1! x r2! x ... x rk!)

where m is the number of letters left and the r_i are their multiplicities.
Once the word's letter is reached it is removed and the walk moves on to the
next position.  The rank starts at 1, so an already alphabetized word ranks
first and a word in descending order ranks last.

Example - BCA:
    position 0: A < B skipped, adds 2! = 2; B matches
    position 1: A < C skipped, adds 1! = 1; C matches
    position 2: A matches
    rank = 1 + 2 + 1 = 4
"""

from dataclasses import dataclass, field
from fractions import Fraction

from wordrank.config import Settings
from wordrank.engine import (
    FACTORIAL_TABLE_LIMIT,
    UINT64_MAX,
    FactorialQuotient,
    divide_factorials,
    factorial,
    multinomial,
)
from wordrank.logger import get_logger
from wordrank.ranker.alphabet import Alphabet
from wordrank.ranker.multiset import LetterMultiset
from wordrank.validation import validate_word

logger = get_logger(__name__)


@dataclass
class RankStep:
    """What happened at one position of the word.

    Attributes:
        position: Zero-based index into the word
        letter: The word's letter at this position
        skipped: Remaining letters compared before the match, each adding a penalty
        penalty: Total added to the rank at this position
    """

    position: int
    letter: str
    skipped: list[str] = field(default_factory=list)
    penalty: int = 0


@dataclass
class RankResult:
    """Rank of a word plus the data needed to explain it."""

    word: str
    rank: int
    total: int  # number of distinct rearrangements, i.e. the highest rank
    steps: list[RankStep] = field(default_factory=list)

    @property
    def fits_uint64(self) -> bool:
        return self.rank <= UINT64_MAX

    @property
    def is_first(self) -> bool:
        return self.rank == 1

    @property
    def is_last(self) -> bool:
        return self.rank == self.total


@dataclass
class RankingState:
    """Mutable bookkeeping owned by a single ranking call.

    Attributes:
        multiset: Counts of letters not yet matched
        remaining: The same letters, alphabetized
        rank: Running rank, starts at 1
        carry: Fractions left over by factorial division, folded in at the end
    """

    multiset: LetterMultiset
    remaining: list[str]
    rank: int = 1
    carry: Fraction = Fraction(0)
    steps: list[RankStep] = field(default_factory=list)


class PermutationRanker:
    """Ranks words over a fixed ordered alphabet.

    The ranker itself holds no per-call state, so one instance can be shared
    between threads.  Input is expected to be validated already.
    """

    def __init__(self, alphabet: Alphabet | str | None = None):
        """Initialize ranker.

        Args:
            alphabet: Letter ordering; a string is turned into an Alphabet
        """
        if alphabet is None:
            alphabet = Alphabet()
        elif isinstance(alphabet, str):
            alphabet = Alphabet(alphabet)
        self.alphabet = alphabet

    @classmethod
    def from_settings(cls, settings: Settings) -> "PermutationRanker":
        return cls(Alphabet(settings.ranking.alphabet))

    def new_state(self, word: str) -> RankingState:
        """Build fresh bookkeeping for a word."""
        multiset = LetterMultiset.from_word(word, self.alphabet)
        return RankingState(multiset=multiset, remaining=multiset.alphabetized())

    def suffix_arrangements(self, state: RankingState, suffix_length: int) -> FactorialQuotient:
        """Arrangements of the suffix behind one skipped letter.

        The plain factorial table is only used when no letter repeats and the
        degree is inside the table; everything else goes through factor
        cancellation.
        """
        if state.multiset.has_repeats or suffix_length > FACTORIAL_TABLE_LIMIT:
            return divide_factorials(suffix_length, state.multiset.repeat_degrees())
        return FactorialQuotient(whole=factorial(suffix_length))

    def rank(self, word: str) -> RankResult:
        """Compute the 1-based rank of a word.

        Args:
            word: Non-empty word whose letters are all in the alphabet

        Returns:
            RankResult with the rank, the highest possible rank and per-position steps
        """
        if not word:
            raise ValueError("Cannot rank an empty word")

        state = self.new_state(word)
        total = multinomial(len(word), state.multiset.degrees())
        length = len(word)

        for position, target in enumerate(word):
            suffix_length = length - position - 1
            step = RankStep(position=position, letter=target)
            position_penalty = 0
            position_carry = Fraction(0)

            for letter in state.remaining:
                if letter == target:
                    break
                quotient = self.suffix_arrangements(state, suffix_length)
                position_penalty += quotient.whole
                position_carry += quotient.remainder
                step.skipped.append(letter)

            state.carry += position_carry
            step.penalty = int(position_penalty + position_carry)

            state.multiset.consume(target)
            # The first occurrence of target sits right after the skipped letters
            del state.remaining[len(step.skipped)]

            state.rank += position_penalty
            state.steps.append(step)

            logger.debug(
                "%s: position %d '%s' skipped %s, penalty %d",
                word,
                position,
                target,
                "".join(step.skipped) or "-",
                step.penalty,
            )

        rank = state.rank + int(state.carry)

        if rank > UINT64_MAX:
            logger.warning("Rank of %s exceeds the unsigned 64-bit range: %d", word, rank)

        return RankResult(word=word, rank=rank, total=total, steps=state.steps)


def rank_word(word: str, settings: Settings | None = None) -> int:
    """Validate a word and return its rank.

    Raises:
        InvalidWordError: If the word fails validation
    """
    settings = settings or Settings()
    validated = validate_word(word, settings).raise_for_errors()
    return PermutationRanker.from_settings(settings).rank(validated).rank


def count_arrangements(word: str, settings: Settings | None = None) -> int:
    """Number of distinct rearrangements of a word's letters.

    Raises:
        InvalidWordError: If the word fails validation
    """
    settings = settings or Settings()
    validated = validate_word(word, settings).raise_for_errors()
    multiset = LetterMultiset.from_word(validated, Alphabet(settings.ranking.alphabet))
    return multinomial(len(validated), multiset.degrees())
