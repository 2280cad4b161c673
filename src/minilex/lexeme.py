"""LexemeBuffer for O(n) lexeme accumulation.

Characters are appended to a list and joined on demand, so building
a lexeme of n characters costs O(n) instead of O(n²) for repeated
string concatenation.

Thread Safety:
LexemeBuffer instances are owned by a single Lexer.
No shared mutable state.

"""

from __future__ import annotations


class LexemeBuffer:
    """Ordered buffer holding the characters of the token being scanned.

    Usage:
            >>> buf = LexemeBuffer()
            >>> buf.append("p").append("i")
            >>> buf.text()
            'pi'
            >>> buf.reset()
            >>> buf.text()
            ''

    """

    __slots__ = ("_chars",)

    def __init__(self) -> None:
        self._chars: list[str] = []

    def append(self, char: str) -> LexemeBuffer:
        """Append one character.

        Args:
            char: Single character to append

        Returns:
            self for method chaining
        """
        self._chars.append(char)
        return self

    def text(self) -> str:
        """Snapshot of the accumulated characters (buffer is unchanged)."""
        return "".join(self._chars)

    def reset(self) -> LexemeBuffer:
        """Clear all accumulated characters.

        Returns:
            self for method chaining
        """
        self._chars.clear()
        return self

    def __len__(self) -> int:
        """Return number of accumulated characters."""
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)
