"""Ordered symbol sets used to alphabetize words."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from wordrank.config.settings import DEFAULT_ALPHABET
from wordrank.exceptions import ConfigError


@dataclass(frozen=True)
class Alphabet:
    """A finite, ordered set of symbols.

    Attributes:
        symbols: Every symbol once, in ascending order
    """

    symbols: str = DEFAULT_ALPHABET
    _positions: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ConfigError("Alphabet must contain at least one symbol")
        if len(set(self.symbols)) != len(self.symbols):
            raise ConfigError(f"Alphabet repeats symbols: {self.symbols!r}")
        object.__setattr__(self, "_positions", {s: i for i, s in enumerate(self.symbols)})

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def order_key(self, symbol: str) -> int:
        """Position of a symbol; raises KeyError for foreign symbols."""
        return self._positions[symbol]

    def sort(self, letters: Iterable[str]) -> list[str]:
        """Letters in ascending alphabet order."""
        return sorted(letters, key=self.order_key)
