"""Token and TokenKind definitions for the minilex scanner.

The scanner produces a stream of Token objects in source order.
Each Token has a kind, the lexeme text, and source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilex.errors import Diagnostic
    from minilex.location import SourceLocation


class TokenKind(Enum):
    """Token classifications produced by the scanner.

    The value is the display name used by the console renderer.
    """

    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    OPERATOR = "Operator"
    KEYWORD = "KeyWord"
    ERROR = "Error"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme.

    Attributes:
        kind: The token classification
        text: The lexeme exactly as it appears in source
        _offset: Absolute start position in source
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        diagnostic: Error details, set only for ERROR tokens
        _source_file: Optional source file path

    """

    kind: TokenKind
    text: str
    _offset: int = 0
    _lineno: int = 1
    _col: int = 1
    diagnostic: Diagnostic | None = None
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from minilex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            end_offset=self._offset + len(self.text),
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.kind.name}, {self.text!r}, {self._lineno}:{self._col})"
