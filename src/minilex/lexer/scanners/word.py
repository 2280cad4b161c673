"""Identifier/keyword scanner mixin."""

from __future__ import annotations

from minilex.lexeme import LexemeBuffer
from minilex.lexer.keywords import lookup
from minilex.tokens import Token, TokenKind


class IdentifierScannerMixin:
    """Mixin providing the IN_IDENTIFIER state.

    Accumulates letters and digits. The first other character ends the
    lexeme without being consumed, so START sees it again.

    """

    _lexeme: LexemeBuffer

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _emit_lexeme(self, kind: TokenKind) -> Token:
        """Emit the buffered lexeme. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_identifier(self, char: str) -> Token | None:
        if char.isalpha() or char.isdecimal():
            self._lexeme.append(self._advance())
            return None

        kind = lookup(self._lexeme.text()) or TokenKind.IDENTIFIER
        return self._emit_lexeme(kind)
