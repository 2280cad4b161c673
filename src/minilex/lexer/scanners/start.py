"""START state scanner mixin."""

from __future__ import annotations

from minilex.errors import ErrorKind
from minilex.lexer.states import OPERATOR_LEAD_CHARS, ScanState
from minilex.tokens import Token


class StartScannerMixin:
    """Mixin providing the START state.

    Classifies the current character and picks the next state without
    consuming it. Only whitespace is consumed here.

    """

    _state: ScanState

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _save_location(self) -> None:
        """Mark the start of a token. Implemented by Lexer."""
        raise NotImplementedError

    def _report(self, kind: ErrorKind, message: str, text: str) -> None:
        """Record a pending diagnostic. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_start(self, char: str) -> Token | None:
        """Dispatch on the character class of the current character.

        Args:
            char: Current character (never the end-of-input sentinel)

        Returns:
            Always None; START never emits.
        """
        if char.isspace():
            self._advance()
            return None

        self._save_location()
        if char.isalpha():
            self._state = ScanState.IN_IDENTIFIER
        elif char.isdecimal():
            self._state = ScanState.IN_INTEGER
        elif char in OPERATOR_LEAD_CHARS:
            self._state = ScanState.IN_OPERATOR
        else:
            self._report(
                ErrorKind.UNRECOGNIZED_CHARACTER,
                f"Invalid input - unrecognized character {char!r}.",
                char,
            )
            self._state = ScanState.FAIL
        return None
