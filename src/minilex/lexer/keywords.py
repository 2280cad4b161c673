"""Reserved word table.

Closed, case-sensitive set of keywords. Built once at import and
exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType

from minilex.tokens import TokenKind

KEYWORDS = MappingProxyType(
    {
        word: TokenKind.KEYWORD
        for word in (
            "if",
            "else",
            "while",
            "for",
            "print",
            "scan",
            "int",
            "double",
            "bool",
            "null",
            "true",
            "false",
            "pi",
        )
    }
)


def lookup(text: str) -> TokenKind | None:
    """Classify an identifier-shaped lexeme.

    Returns:
        TokenKind.KEYWORD for a reserved word, None otherwise.
    """
    return KEYWORDS.get(text)


def is_keyword(text: str) -> bool:
    return text in KEYWORDS
