"""Logging utilities for qubit_calculator.

Every module asks for its logger through `get_logger(__name__)`, so all
package loggers share one handler setup and one level.
"""

import logging
import sys
from typing import Dict, Optional, Union

from . import config

_DEFAULT_LEVEL = getattr(logging, config.LOG_LEVEL, logging.WARNING)

_loggers: Dict[str, logging.Logger] = {}


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a package logger.

    Args:
        name: Logger name, typically `__name__`. Names outside the package
            are prefixed with ``qubit_calculator.``.

    Returns:
        A cached logger with a single stderr handler.
    """
    if name is None:
        name = "qubit_calculator"
    if name != "qubit_calculator" and not name.startswith("qubit_calculator."):
        name = f"qubit_calculator.{name}"

    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[name] = logger
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every package logger, including ones created later."""
    global _DEFAULT_LEVEL
    level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level
