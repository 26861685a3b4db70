"""Checks applied to user input before a word is handed to the ranker."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntFlag

from wordrank.config import Settings
from wordrank.exceptions import InvalidWordError
from wordrank.logger import get_logger

logger = get_logger(__name__)


class InputError(IntFlag):
    """Validation failures; several may be set at once.

    The values double as the CLI exit status.
    """

    NONE = 0
    TOO_MANY_WORDS = 0x01
    TOO_MANY_LETTERS = 0x02
    TOO_FEW_LETTERS = 0x04
    TOO_FEW_WORDS = 0x08
    INVALID_CHARACTER = 0x10


ERROR_MESSAGES: dict[InputError, str] = {
    InputError.TOO_MANY_WORDS: "You entered too many words.",
    InputError.TOO_MANY_LETTERS: "You entered too many letters.",
    InputError.TOO_FEW_LETTERS: "You entered too few letters.",
    InputError.TOO_FEW_WORDS: "You entered too few words.",
    InputError.INVALID_CHARACTER: "You entered characters that are not capital letters.",
}


@dataclass
class ValidationResult:
    """Outcome of validating the words supplied by a caller.

    Attributes:
        errors: Every failed check
        word: The single word, when exactly one was supplied
        invalid_characters: Offending symbols in order of first appearance
    """

    errors: InputError = InputError.NONE
    word: str | None = None
    invalid_characters: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if the word can be ranked."""
        return not self.errors

    def messages(self) -> list[str]:
        """One description per failed check, in flag order."""
        lines = [f"'{ch}' is not a valid character." for ch in self.invalid_characters]
        lines.extend(text for flag, text in ERROR_MESSAGES.items() if flag in self.errors)
        return lines

    def raise_for_errors(self) -> str:
        """Return the validated word or raise InvalidWordError."""
        if self.errors or self.word is None:
            raise InvalidWordError(self.errors, self.messages())
        return self.word


def usage_hint(settings: Settings | None = None) -> str:
    """Line printed after the error descriptions."""
    ranking = (settings or Settings()).ranking
    return f"Please enter just one word consisting of {ranking.min_letters}-{ranking.max_letters} capital letters."


def validate_words(words: Sequence[str], settings: Settings | None = None) -> ValidationResult:
    """Validate the raw word list given on the command line.

    Length and character checks only run when exactly one word was given.

    Args:
        words: Words as supplied by the caller
        settings: Limits and alphabet; defaults apply when None

    Returns:
        ValidationResult with all triggered errors
    """
    ranking = (settings or Settings()).ranking
    result = ValidationResult()

    if len(words) < 1:
        result.errors |= InputError.TOO_FEW_WORDS
        return result
    if len(words) > 1:
        result.errors |= InputError.TOO_MANY_WORDS
        return result

    word = words[0]
    result.word = word
    logger.info("Checking word: '%s'", word)

    if len(word) < ranking.min_letters:
        result.errors |= InputError.TOO_FEW_LETTERS
    elif len(word) > ranking.max_letters:
        result.errors |= InputError.TOO_MANY_LETTERS

    allowed = set(ranking.alphabet)
    for ch in word:
        if ch not in allowed and ch not in result.invalid_characters:
            result.invalid_characters.append(ch)
    if result.invalid_characters:
        result.errors |= InputError.INVALID_CHARACTER

    if result.ok:
        logger.info("No errors detected in input.")
    else:
        logger.info("Input rejected: %s", result.errors)
    return result


def validate_word(word: str, settings: Settings | None = None) -> ValidationResult:
    """Validate a single word supplied through the library API."""
    return validate_words([word], settings)
