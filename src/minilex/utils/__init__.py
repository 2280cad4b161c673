"""Utility modules for minilex.

Provides:
- logger: get_logger for logging
"""

from minilex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
