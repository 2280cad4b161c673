"""Logger lookup under the ``minilex`` namespace."""

from __future__ import annotations

import logging

_ROOT = "minilex"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name, prefixed with ``minilex.``.

    Example:
        >>> get_logger("mymodule").name
        'minilex.mymodule'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
