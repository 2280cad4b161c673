"""Integer and decimal literal scanner mixin."""

from __future__ import annotations

from minilex.errors import ErrorKind
from minilex.lexeme import LexemeBuffer
from minilex.lexer.states import DECIMAL_POINT, ScanState
from minilex.tokens import Token, TokenKind


class NumberScannerMixin:
    """Mixin providing the IN_INTEGER and IN_FRACTION states.

    A literal is digits, optionally followed by one decimal point and
    more digits. A second decimal point inside the same literal is a
    malformed number: the partial lexeme is discarded and the scanner
    moves to FAIL.

    """

    _state: ScanState
    _lexeme: LexemeBuffer

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _emit_lexeme(self, kind: TokenKind) -> Token:
        """Emit the buffered lexeme. Implemented by Lexer."""
        raise NotImplementedError

    def _report(self, kind: ErrorKind, message: str, text: str) -> None:
        """Record a pending diagnostic. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_integer(self, char: str) -> Token | None:
        """Integer part. A decimal point moves to IN_FRACTION.

        Args:
            char: Current character or the end-of-input sentinel

        Returns:
            NUMBER token when the literal ends, else None.
        """
        if char.isdecimal():
            self._lexeme.append(self._advance())
            return None
        if char == DECIMAL_POINT:
            self._lexeme.append(self._advance())
            self._state = ScanState.IN_FRACTION
            return None
        return self._emit_lexeme(TokenKind.NUMBER)

    def _scan_fraction(self, char: str) -> Token | None:
        """Fractional part. A second decimal point is an error.

        Args:
            char: Current character or the end-of-input sentinel

        Returns:
            NUMBER token when the literal ends, else None.
        """
        if char.isdecimal():
            self._lexeme.append(self._advance())
            return None
        if char == DECIMAL_POINT:
            text = self._lexeme.text() + char
            self._lexeme.reset()
            self._report(
                ErrorKind.MALFORMED_NUMBER,
                "Invalid input - multiple decimal points in a number.",
                text,
            )
            self._state = ScanState.FAIL
            return None
        return self._emit_lexeme(TokenKind.NUMBER)
