"""Scanner states and character class constants.

This module defines the finite state machine states for the lexer
and the constant sets used to classify lead characters.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Scanner states.

    Exactly one is active at any time:
    - START: Between tokens, classifying the next character
    - IN_IDENTIFIER: Accumulating letters and digits
    - IN_INTEGER: Accumulating the integer part of a number
    - IN_FRACTION: Accumulating digits after the decimal point
    - IN_OPERATOR: Resolving a punctuation/operator token
    - ADVANCE: Moving the cursor past the finished token
    - FAIL: Reporting the pending diagnostic

    """

    START = auto()
    IN_IDENTIFIER = auto()
    IN_INTEGER = auto()
    IN_FRACTION = auto()
    IN_OPERATOR = auto()
    ADVANCE = auto()
    FAIL = auto()


# Returned by _peek() at end of input; matches no character class
EOF_SENTINEL = ""

DECIMAL_POINT = "."

# Characters that switch START into IN_OPERATOR
OPERATOR_LEAD_CHARS = frozenset("=-+*/()><!;|&{}[],.")

# Lead character -> (required/optional second character, valid alone)
COMPOUND_OPERATORS: dict[str, tuple[str, bool]] = {
    "=": ("=", True),
    "<": ("=", True),
    ">": ("=", True),
    "!": ("=", False),
    "&": ("&", False),
    "|": ("|", False),
}
