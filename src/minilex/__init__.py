"""
minilex: finite-state lexer for a small imperative language

Tokenizes source text (arithmetic, comparison and logical operators,
control-flow keywords, identifiers, integer and decimal literals) into
classified tokens. Lexical errors never stop a scan; they appear in the
stream as ERROR tokens carrying a Diagnostic.

Quick Start:
    >>> from minilex import tokenize
    >>> [t.text for t in tokenize("if (a == 52)")]
    ['if', '(', 'a', '==', '52', ')']

    >>> # Lazy stream
    >>> from minilex import scan
    >>> next(scan("pi * r")).kind
    <TokenKind.KEYWORD: 'KeyWord'>
"""

from collections.abc import Iterator

from minilex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from minilex.errors import Diagnostic, ErrorKind, LexError, MinilexError
from minilex.lexeme import LexemeBuffer
from minilex.lexer import KEYWORDS, Lexer, ScanState
from minilex.location import SourceLocation
from minilex.render import format_token, render_tokens
from minilex.tokens import Token, TokenKind
from minilex.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)

SAMPLE_PROGRAM = "if (a == 52 && c == 5.2) { b = a - c; print(b);} else { print(a);}"


def scan(source: str, *, source_file: str | None = None) -> Iterator[Token]:
    """Lazily tokenize source.

    Single-pass: call again to rescan. Configuration is not applied;
    every ERROR token is yielded.

    Args:
        source: Program source text
        source_file: Optional source file path for diagnostics

    Returns:
        Iterator of tokens in source order
    """
    return Lexer(source, source_file).tokenize()


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize source into a list, applying the current ScanConfig.

    Args:
        source: Program source text
        source_file: Optional source file path for diagnostics

    Returns:
        Tokens in source order

    Raises:
        LexError: In strict mode, for the first ERROR token

    Example:
        >>> with scan_config_context(ScanConfig(keep_errors=False)):
        ...     [t.text for t in tokenize("a & b")]
        ['a', 'b']
    """
    config = get_scan_config()
    tokens: list[Token] = []
    errors = 0
    for token in scan(source, source_file=source_file):
        if token.kind is TokenKind.ERROR:
            errors += 1
            if config.strict and token.diagnostic is not None:
                raise LexError(token.diagnostic)
            if not config.keep_errors:
                continue
        tokens.append(token)

    if errors:
        logger.warning(
            "%s: %d lexical error(s) in %d characters",
            source_file or "<string>",
            errors,
            len(source),
        )
    return tokens


__all__ = [
    "KEYWORDS",
    "SAMPLE_PROGRAM",
    "Diagnostic",
    "ErrorKind",
    "LexError",
    "LexemeBuffer",
    "Lexer",
    "MinilexError",
    "ScanConfig",
    "ScanState",
    "SourceLocation",
    "Token",
    "TokenKind",
    "__version__",
    "format_token",
    "get_scan_config",
    "render_tokens",
    "reset_scan_config",
    "scan",
    "scan_config_context",
    "set_scan_config",
    "tokenize",
]
