"""Modular state-machine lexer for minilex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ScanState
├── core.py              # Lexer class (mixin composition + navigation)
├── states.py            # ScanState enum, character class constants
├── keywords.py          # Reserved word table
└── scanners/            # State-specific scanners
    ├── start.py         # START (character classification)
    ├── word.py          # IN_IDENTIFIER
    ├── number.py        # IN_INTEGER, IN_FRACTION
    ├── operator.py      # IN_OPERATOR (compound operator resolution)
    └── recovery.py      # ADVANCE, FAIL

Usage:
    >>> from minilex.lexer import Lexer
    >>> for token in Lexer("x >= 10").tokenize():
    ...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(OPERATOR, '>=', 1:3)
Token(NUMBER, '10', 1:6)

"""

from minilex.lexer.core import Lexer
from minilex.lexer.keywords import KEYWORDS, is_keyword, lookup
from minilex.lexer.states import ScanState

__all__ = ["KEYWORDS", "Lexer", "ScanState", "is_keyword", "lookup"]
