"""Error taxonomy for statement tree construction."""

from __future__ import annotations


class StatementTreeError(Exception):
    """Base class for every error raised by this package."""


class UnsupportedLanguageError(StatementTreeError, ValueError):
    """The language id has no registered grammar."""

    def __init__(self, language_id: str):
        super().__init__(f"Unsupported language: {language_id}")
        self.language_id = language_id


class InvalidRangeError(StatementTreeError, ValueError):
    """The query range does not lie within the source text."""


class ParseFailureError(StatementTreeError):
    """The CST parser raised or returned unusable output."""


class TreeAlreadyBuiltError(StatementTreeError):
    """``build()`` was called on a tree that has already been built."""


class StatementTreeInvariantError(StatementTreeError, AssertionError):
    """A built tree violates the containment or ordering invariants."""
