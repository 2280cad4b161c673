"""Finite-state scanner for the minilex expression/statement language.

Walks the source one character at a time. Each step hands the current
character to the handler of the active ScanState; a handler may
accumulate, emit one token, transition, or skip.

The scanner never raises on bad input. Unrecognized characters,
malformed operators and malformed numbers become ERROR tokens and
scanning resumes at the next character.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from minilex.errors import Diagnostic, ErrorKind
from minilex.lexeme import LexemeBuffer
from minilex.lexer.scanners import (
    IdentifierScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    RecoveryScannerMixin,
    StartScannerMixin,
)
from minilex.lexer.states import EOF_SENTINEL, ScanState
from minilex.tokens import Token, TokenKind
from minilex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    StartScannerMixin,
    IdentifierScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    RecoveryScannerMixin,
):
    """State-machine scanner producing classified tokens.

    Usage:
            >>> lexer = Lexer("b = a - 5.2;")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(IDENTIFIER, 'b', 1:1)
        Token(OPERATOR, '=', 1:3)
        Token(IDENTIFIER, 'a', 1:5)
        Token(OPERATOR, '-', 1:7)
        Token(NUMBER, '5.2', 1:9)
        Token(OPERATOR, ';', 1:12)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_source_file",
        "_pos",
        "_lineno",
        "_col",
        "_state",
        "_lexeme",
        # Start of the token being scanned
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
        # Cursor move scheduled for ADVANCE
        "_pending_width",
        # Error scheduled for FAIL
        "_pending_diagnostic",
        "_pending_text",
        "_diagnostics",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Program source text
            source_file: Optional source file path for diagnostics
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._state = ScanState.START
        self._lexeme = LexemeBuffer()

        self._saved_pos: int = 0
        self._saved_lineno: int = 1
        self._saved_col: int = 1

        self._pending_width: int = 0
        self._pending_diagnostic: Diagnostic | None = None
        self._pending_text: str = ""
        self._diagnostics: list[Diagnostic] = []

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Diagnostics reported so far, in source order."""
        return tuple(self._diagnostics)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        End of input acts as a terminator for the token in progress, so a
        trailing identifier or number is still emitted.

        Yields:
            Token objects in source order

        Complexity: O(n) where n = len(source)
        """
        handlers = _STATE_HANDLERS
        while self._pos < self._source_len or self._state is not ScanState.START:
            token = handlers[self._state](self, self._peek())
            if token is not None:
                yield token

    # =========================================================================
    # Character navigation
    # =========================================================================

    def _peek(self) -> str:
        """Current character, or the sentinel at end of input."""
        if self._pos >= self._source_len:
            return EOF_SENTINEL
        return self._source[self._pos]

    def _peek_next(self) -> str:
        """One character of lookahead past the current character."""
        if self._pos + 1 >= self._source_len:
            return EOF_SENTINEL
        return self._source[self._pos + 1]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character, or the sentinel at end of input.
        """
        if self._pos >= self._source_len:
            return EOF_SENTINEL

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    # =========================================================================
    # Token construction
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(
        self, kind: TokenKind, text: str, diagnostic: Diagnostic | None = None
    ) -> Token:
        return Token(
            kind=kind,
            text=text,
            _offset=self._saved_pos,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            diagnostic=diagnostic,
            _source_file=self._source_file,
        )

    def _emit(self, kind: TokenKind, text: str, width: int) -> Token:
        """Create a token and hand the cursor move to ADVANCE.

        Args:
            kind: Token classification
            text: Lexeme text
            width: Characters ADVANCE must consume (0 if already consumed)

        Returns:
            The new token.
        """
        self._pending_width = width
        self._state = ScanState.ADVANCE
        return self._make_token(kind, text)

    def _emit_lexeme(self, kind: TokenKind) -> Token:
        """Emit the buffered lexeme and reset the buffer.

        The lexeme's characters are already consumed and the terminator
        is not, so ADVANCE moves nothing.
        """
        text = self._lexeme.text()
        self._lexeme.reset()
        return self._emit(kind, text, 0)

    def _report(self, kind: ErrorKind, message: str, text: str) -> None:
        """Record a diagnostic at the current character for FAIL to emit.

        Args:
            kind: Error category
            message: Human-readable description
            text: Text of the ERROR token (offending input)
        """
        diagnostic = Diagnostic(
            kind=kind,
            message=message,
            char=self._peek(),
            offset=self._pos,
            lineno=self._lineno,
            col=self._col,
            source_file=self._source_file,
        )
        logger.debug("Lexical error at %s: %s", diagnostic.location, message)
        self._diagnostics.append(diagnostic)
        self._pending_diagnostic = diagnostic
        self._pending_text = text


_STATE_HANDLERS: dict[ScanState, Callable[[Lexer, str], Token | None]] = {
    ScanState.START: Lexer._scan_start,
    ScanState.IN_IDENTIFIER: Lexer._scan_identifier,
    ScanState.IN_INTEGER: Lexer._scan_integer,
    ScanState.IN_FRACTION: Lexer._scan_fraction,
    ScanState.IN_OPERATOR: Lexer._scan_operator,
    ScanState.ADVANCE: Lexer._scan_advance,
    ScanState.FAIL: Lexer._scan_fail,
}
