#!/usr/bin/env python3
"""Custom exceptions for emojify.

This module defines the exception hierarchy for alias table construction
and stream translation errors.
"""


class EmojifyError(Exception):
    """Base exception for all emojify errors."""


class AliasTableError(EmojifyError):
    """Base exception for alias table construction errors.

    These are fatal at startup; a table that raised one is never used.
    """


class InvalidEntryError(AliasTableError):
    """Raised when an alias entry violates its own invariants."""


class DuplicateAliasError(AliasTableError):
    """Raised when two entries claim the same alias name."""

    def __init__(self, alias: str, first: str, second: str):
        self.alias = alias
        self.first = first
        self.second = second
        super().__init__(f"Alias {alias!r} claimed by both {first!r} and {second!r}")


class AmbiguousSequenceError(AliasTableError):
    """Raised when two entries claim the same emoji sequence without a precedence rule."""

    def __init__(self, sequence: str, names: list[str]):
        self.sequence = sequence
        self.names = names
        codepoints = " ".join(f"U+{ord(ch):04X}" for ch in sequence)
        super().__init__(f"Sequence {codepoints} claimed by {', '.join(names)}")


class DataFileError(AliasTableError):
    """Raised when alias data cannot be read, fetched or validated."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class IOFailure(EmojifyError):
    """Raised when the underlying reader or writer fails.

    ``direction`` is ``"read"`` or ``"write"``; ``cause`` is the original
    exception, also chained as ``__cause__``.
    """

    def __init__(self, direction: str, cause: Exception):
        self.direction = direction
        self.cause = cause
        super().__init__(f"{direction} failed: {cause}")


class PipelineClosedError(EmojifyError):
    """Raised when data is fed to a pipeline that has already been drained."""
