"""Input validation for words to be ranked."""

from .input_validator import InputError, ValidationResult, usage_hint, validate_word, validate_words

__all__ = [
    "InputError",
    "ValidationResult",
    "usage_hint",
    "validate_word",
    "validate_words",
]
