"""State-specific scanners for the minilex lexer.

Each scanner is a mixin that provides the handler(s) for one group of
scanner states.
"""

from __future__ import annotations

from minilex.lexer.scanners.number import NumberScannerMixin
from minilex.lexer.scanners.operator import OperatorScannerMixin
from minilex.lexer.scanners.recovery import RecoveryScannerMixin
from minilex.lexer.scanners.start import StartScannerMixin
from minilex.lexer.scanners.word import IdentifierScannerMixin

__all__ = [
    "IdentifierScannerMixin",
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "RecoveryScannerMixin",
    "StartScannerMixin",
]
