"""Exception hierarchy for wordrank.

Validation problems and configuration problems get their own types so the
CLI can report them without catching programming mistakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import InputError


class WordRankError(Exception):
    """Base exception for all wordrank errors."""


class ConfigError(WordRankError):
    """The settings file or the configured alphabet is unusable."""


class InvalidWordError(WordRankError):
    """Input did not pass validation; the ranker was not invoked."""

    def __init__(self, errors: "InputError", messages: list[str]):
        self.errors = errors
        self.messages = messages
        super().__init__("; ".join(messages))
