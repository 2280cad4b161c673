"""Diagnostics and exception classes for minilex.

The scanner itself never raises: every lexical problem becomes a
Diagnostic attached to an ERROR token. LexError wraps a Diagnostic for
callers that prefer to stop at the first problem (strict mode, CLI).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from minilex.location import SourceLocation


class ErrorKind(Enum):
    """Recoverable lexical error categories."""

    UNRECOGNIZED_CHARACTER = auto()  # Not whitespace, letter, digit or punctuation
    MALFORMED_OPERATOR = auto()  # Lone !, & or |
    MALFORMED_NUMBER = auto()  # Second decimal point in one literal


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single recoverable lexical error.

    Attributes:
        kind: Error category
        message: Human-readable description
        char: The offending character
        offset: Absolute position of the offending character
        lineno: Line of the offending character (1-indexed)
        col: Column of the offending character (1-indexed)
        source_file: Optional source file path
    """

    kind: ErrorKind
    message: str
    char: str
    offset: int
    lineno: int
    col: int
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Location of the offending character."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            end_offset=self.offset + len(self.char),
            source_file=self.source_file,
        )

    def __str__(self) -> str:
        return f"{self.location} {self.message}"


class MinilexError(Exception):
    """Base exception for all minilex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(MinilexError):
    """Lexical error raised outside the scanner.

    Raised by ``minilex.tokenize`` in strict mode for the first
    diagnostic a scan produces.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize lex error from a diagnostic.

        Args:
            diagnostic: The diagnostic that triggered the error
        """
        self.diagnostic = diagnostic
        self.message = diagnostic.message
        self.lineno = diagnostic.lineno
        self.col_offset = diagnostic.col
        self.source_file = diagnostic.source_file
        super().__init__(str(diagnostic))
