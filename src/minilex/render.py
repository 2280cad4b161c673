"""Console rendering of token streams.

Presentation only: turns tokens into the line format printed by the
command line tool. Nothing in the scanner depends on this module.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from minilex.tokens import Token, TokenKind


def format_token(token: Token, *, with_location: bool = False) -> str:
    """Format one token as a console line.

    Args:
        token: Token to format
        with_location: Prefix the line with ``line:col`` (no file name)

    Returns:
        ``Lexeme: <text> (Type: <kind>)`` or ``Error: <message>``

    Example:
        >>> format_token(Token(TokenKind.OPERATOR, "=="))
        'Lexeme: == (Type: Operator)'
    """
    if token.kind is TokenKind.ERROR:
        message = token.diagnostic.message if token.diagnostic else "Invalid input"
        line = f"Error: {message}"
    else:
        line = f"Lexeme: {token.text} (Type: {token.kind.value})"
    if with_location:
        return f"{token.lineno}:{token.col} {line}"
    return line


def render_tokens(
    tokens: Iterable[Token], *, with_location: bool = False
) -> Iterator[str]:
    """Lazily format a token stream, one line per token."""
    for token in tokens:
        yield format_token(token, with_location=with_location)
