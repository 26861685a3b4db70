"""Factorial lookup and overflow-safe factorial division.

Counting the rearrangements of a multiset of letters needs quotients like

    n! / (r1! x r2! x ... x rk!)

where n! alone can be far larger than the final answer.  Instead of forming
n! and the denominator product and dividing, both factorials are expanded
into their factors and the denominator factors are cancelled greedily
against the numerator factors first.  Only the survivors are multiplied.

The greedy pass does not always cancel everything, so a quotient may come
out with a remainder.  That remainder is returned as an exact fraction and
the caller sums the fractions across a whole ranking before folding them
back into the integer result.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from fractions import Fraction

from wordrank.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# FACTORIAL TABLE
# =============================================================================

# 20! is the largest factorial that fits in an unsigned 64-bit integer
FACTORIAL_TABLE_LIMIT = 20

UINT64_MAX = 2**64 - 1

# Returned for indices past the table; deliberately wrong but predictable
OUT_OF_TABLE_SENTINEL = 1

FACTORIALS: tuple[int, ...] = (
    1,                      # 0!
    1,                      # 1!
    2,                      # 2!
    6,                      # 3!
    24,                     # 4!
    120,                    # 5!
    720,                    # 6!
    5040,                   # 7!
    40320,                  # 8!
    362880,                 # 9!
    3628800,                # 10!
    39916800,               # 11!
    479001600,              # 12!
    6227020800,             # 13!
    87178291200,            # 14!
    1307674368000,          # 15!
    20922789888000,         # 16!
    355687428096000,        # 17!
    6402373705728000,       # 18!
    121645100408832000,     # 19!
    2432902008176640000,    # 20!
)


def factorial(k: int) -> int:
    """Return k! from the precomputed table.

    Args:
        k: Factorial degree, 0 <= k <= 20

    Returns:
        k!, or OUT_OF_TABLE_SENTINEL when k is past the table

    Raises:
        ValueError: If k is negative
    """
    if k < 0:
        raise ValueError(f"Factorial degree must be non-negative, got {k}")
    if k > FACTORIAL_TABLE_LIMIT:
        logger.warning(
            "%d! is outside the factorial table (limit %d!), returning sentinel %d",
            k,
            FACTORIAL_TABLE_LIMIT,
            OUT_OF_TABLE_SENTINEL,
        )
        return OUT_OF_TABLE_SENTINEL
    return FACTORIALS[k]


# =============================================================================
# FACTORIAL DIVISION
# =============================================================================


@dataclass(frozen=True)
class FactorialQuotient:
    """Result of dividing one factorial by a product of factorials.

    Attributes:
        whole: Integer part of the quotient
        remainder: Leftover fraction in [0, 1)
    """

    whole: int
    remainder: Fraction = Fraction(0)

    @property
    def value(self) -> Fraction:
        """Exact value of the quotient."""
        return self.whole + self.remainder

    @property
    def is_exact(self) -> bool:
        """True if the division left nothing over."""
        return self.remainder == 0


def _explode(degree: int) -> list[int]:
    """Factors of degree! greater than one, largest first."""
    return list(range(degree, 1, -1))


def divide_factorials(numerator_degree: int, denominator_degrees: Iterable[int]) -> FactorialQuotient:
    """Compute n! / (r1! x ... x rk!) by cancelling factors before multiplying.

    Each numerator factor, from the largest down, is matched against the
    first denominator factor that divides it evenly.  An equal factor
    cancels both; a proper divisor reduces the numerator factor to the
    quotient and cancels the denominator factor.  The surviving factors are
    multiplied and divided once.

    Args:
        numerator_degree: n in n!
        denominator_degrees: The r_i; degrees 0 and 1 contribute nothing

    Returns:
        FactorialQuotient with the integer part and exact fractional remainder

    Raises:
        ValueError: If any degree is negative
    """
    if numerator_degree < 0:
        raise ValueError(f"Factorial degree must be non-negative, got {numerator_degree}")

    degrees = list(denominator_degrees)
    numer_pieces = _explode(numerator_degree)
    denom_pieces: list[int] = []
    for degree in degrees:
        if degree < 0:
            raise ValueError(f"Factorial degree must be non-negative, got {degree}")
        denom_pieces.extend(_explode(degree))

    for i, numer in enumerate(numer_pieces):
        for j, denom in enumerate(denom_pieces):
            if denom == 1 or numer % denom:
                continue
            numer_pieces[i] = numer // denom
            denom_pieces[j] = 1
            break

    numer_product = math.prod(p for p in numer_pieces if p > 1)
    denom_product = math.prod(p for p in denom_pieces if p > 1)

    whole, remain = divmod(numer_product, denom_product)
    remainder = Fraction(remain, denom_product) if remain else Fraction(0)

    if remainder:
        logger.debug(
            "%d! / %s left remainder %s after cancellation",
            numerator_degree,
            "*".join(f"{d}!" for d in degrees),
            remainder,
        )

    return FactorialQuotient(whole=whole, remainder=remainder)


def multinomial(total: int, degrees: Iterable[int]) -> int:
    """Number of distinct arrangements of a multiset.

    Args:
        total: Size of the multiset
        degrees: Multiplicity of each distinct element

    Returns:
        total! / prod(degree!), always an integer when sum(degrees) == total
    """
    degrees = list(degrees)
    value = divide_factorials(total, degrees).value
    if value.denominator != 1:
        raise ValueError(f"{total}! is not divisible by the factorials of {degrees}")
    return value.numerator
