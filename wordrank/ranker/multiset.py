"""Letter counts of a word."""

from collections import Counter

from wordrank.ranker.alphabet import Alphabet


class LetterMultiset:
    """Occurrence count of each letter still to be placed.

    Counts never go negative and always sum to the number of letters left.
    """

    def __init__(self, alphabet: Alphabet, counts: Counter | None = None):
        self.alphabet = alphabet
        self._counts: Counter = Counter()
        for letter, count in (counts or {}).items():
            if letter not in alphabet:
                raise ValueError(f"{letter!r} is not in the alphabet")
            if count < 0:
                raise ValueError(f"Negative count for {letter!r}")
            if count:
                self._counts[letter] = count

    @classmethod
    def from_word(cls, word: str, alphabet: Alphabet) -> "LetterMultiset":
        return cls(alphabet, Counter(word))

    def __len__(self) -> int:
        return sum(self._counts.values())

    def __repr__(self) -> str:
        inner = ", ".join(f"{letter}={self._counts[letter]}" for letter in self.letters())
        return f"LetterMultiset({inner})"

    def count(self, letter: str) -> int:
        return self._counts.get(letter, 0)

    def letters(self) -> list[str]:
        """Distinct letters present, ascending."""
        return self.alphabet.sort(self._counts)

    def alphabetized(self) -> list[str]:
        """Every remaining letter, repeated per its count, ascending."""
        return [letter for letter in self.letters() for _ in range(self._counts[letter])]

    def degrees(self) -> list[int]:
        """Counts of the distinct letters present, in alphabet order."""
        return [self._counts[letter] for letter in self.letters()]

    def repeat_degrees(self) -> list[int]:
        """Counts greater than one; these are the factorials to divide by."""
        return [d for d in self.degrees() if d > 1]

    @property
    def has_repeats(self) -> bool:
        return any(count > 1 for count in self._counts.values())

    def consume(self, letter: str) -> None:
        """Remove one occurrence of a letter.

        Raises:
            ValueError: If the letter has no occurrences left
        """
        if not self._counts.get(letter):
            raise ValueError(f"No {letter!r} left to consume")
        self._counts[letter] -= 1
        if not self._counts[letter]:
            del self._counts[letter]
