"""
utils/logger.py
---------------
Logging setup for RaceBook.

Log records go to stderr; stdout carries the CLI's JSON output only.
The starting level comes from LOG_LEVEL and can be changed at runtime
with `set_level`, e.g. from the CLI's --log-level option.
"""

import logging
import sys

from config import LOG_LEVEL

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: logging.Handler | None = None


def _install_handler() -> None:
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.addHandler(_handler)
    set_level(LOG_LEVEL if LOG_LEVEL in LOG_LEVELS else "INFO")


def set_level(level: str) -> None:
    """
    Set the root logger level by name.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS.
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
    logging.getLogger().setLevel(getattr(logging, name))


def get_logger(name: str) -> logging.Logger:
    """Return the named logger, installing the stderr handler on first use."""
    _install_handler()
    return logging.getLogger(name)
