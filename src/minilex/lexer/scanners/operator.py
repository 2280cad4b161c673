"""Operator/punctuation scanner mixin."""

from __future__ import annotations

from minilex.errors import ErrorKind
from minilex.lexer.states import COMPOUND_OPERATORS, ScanState
from minilex.tokens import Token, TokenKind


class OperatorScannerMixin:
    """Mixin providing the IN_OPERATOR state.

    Resolves the operator from the current character plus one character
    of lookahead. A compound form always wins over its one-character
    prefix. Leads that have no valid one-character form (!, &, |) are
    malformed when the second character is missing.

    """

    _state: ScanState
    _pending_width: int

    def _peek_next(self) -> str:
        """Lookahead character. Implemented by Lexer."""
        raise NotImplementedError

    def _emit(self, kind: TokenKind, text: str, width: int) -> Token:
        """Emit a token and schedule the cursor move. Implemented by Lexer."""
        raise NotImplementedError

    def _report(self, kind: ErrorKind, message: str, text: str) -> None:
        """Record a pending diagnostic. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_operator(self, char: str) -> Token | None:
        """Emit the operator starting at the current character.

        Characters are not consumed here; the emitted width is consumed
        by the ADVANCE state.

        Args:
            char: Operator lead character

        Returns:
            OPERATOR token, or None when the operator is malformed.
        """
        compound = COMPOUND_OPERATORS.get(char)
        if compound is None:
            return self._emit(TokenKind.OPERATOR, char, 1)

        second, valid_alone = compound
        if self._peek_next() == second:
            return self._emit(TokenKind.OPERATOR, char + second, 2)
        if valid_alone:
            return self._emit(TokenKind.OPERATOR, char, 1)

        self._report(
            ErrorKind.MALFORMED_OPERATOR,
            f"Invalid input - unrecognized operator {char!r}.",
            char,
        )
        self._state = ScanState.FAIL
        return None
