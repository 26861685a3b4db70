"""Factorial arithmetic for permutation counting."""

from .factorials import (
    FACTORIAL_TABLE_LIMIT,
    FACTORIALS,
    OUT_OF_TABLE_SENTINEL,
    UINT64_MAX,
    FactorialQuotient,
    divide_factorials,
    factorial,
    multinomial,
)

__all__ = [
    "FACTORIALS",
    "FACTORIAL_TABLE_LIMIT",
    "OUT_OF_TABLE_SENTINEL",
    "UINT64_MAX",
    "FactorialQuotient",
    "divide_factorials",
    "factorial",
    "multinomial",
]
