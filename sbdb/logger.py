"""Package-wide logger used to report values that could not be converted."""

from __future__ import annotations

import logging
from typing import Optional

__all__ = ["set_logger", "get_logger"]


def _disabled_logger() -> logging.Logger:
    """A detached logger that never emits anything."""
    logger = logging.Logger("sbdb.disabled")
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    logger.disabled = True
    return logger


_DISABLED = _disabled_logger()
_logger: logging.Logger = _DISABLED


def set_logger(logger: Optional[logging.Logger]) -> None:
    """Replace the package logger; passing None disables logging."""
    global _logger
    _logger = _DISABLED if logger is None else logger


def get_logger() -> logging.Logger:
    """Return the logger the package currently writes to."""
    return _logger