"""Source location tracking for diagnostics and debugging.

Provides SourceLocation dataclass for tracking positions in source text.
Used by tokens and diagnostics to point a user at the offending input.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All line/column positions are 1-indexed; offsets are 0-indexed
    positions in the source string.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=4, offset=3, end_offset=5)
            >>> str(loc)
            '1:4'

            >>> str(SourceLocation(2, 1, 10, 11, "prog.txt"))
            'prog.txt:2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return self.end_offset - self.offset
