"""ADVANCE and FAIL state scanner mixin."""

from __future__ import annotations

from minilex.errors import Diagnostic
from minilex.lexer.states import ScanState
from minilex.tokens import Token, TokenKind


class RecoveryScannerMixin:
    """Mixin providing the ADVANCE and FAIL states.

    ADVANCE separates "a token finished" from "the cursor moved past it":
    it consumes exactly the width scheduled by the state that finished
    (0 for identifiers and numbers, whose terminator START must see
    again) and returns to START.

    FAIL turns the pending diagnostic into an ERROR token and schedules
    a one-character skip so scanning resumes after the offending input.

    """

    _state: ScanState
    _pending_width: int
    _pending_diagnostic: Diagnostic | None
    _pending_text: str

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(
        self, kind: TokenKind, text: str, diagnostic: Diagnostic | None = None
    ) -> Token:
        """Create a token at the saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_advance(self, char: str) -> Token | None:
        for _ in range(self._pending_width):
            self._advance()
        self._pending_width = 0
        self._state = ScanState.START
        return None

    def _scan_fail(self, char: str) -> Token | None:
        """Emit the ERROR token for the pending diagnostic.

        Args:
            char: The offending character

        Returns:
            The ERROR token.
        """
        diagnostic = self._pending_diagnostic
        token = self._make_token(TokenKind.ERROR, self._pending_text, diagnostic)

        self._pending_diagnostic = None
        self._pending_text = ""
        self._pending_width = 1
        self._state = ScanState.ADVANCE
        return token
