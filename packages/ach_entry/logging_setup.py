"""Logging for ``ach_entry``.

Modules log through ``get_logger("ach_entry.<module>")`` and never install
handlers. Only the ``ach-entry`` console script calls
:func:`configure_logging`; until then the ``ach_entry`` logger carries a
``NullHandler`` so host applications see nothing they did not ask for.

The level comes from ``ACH_ENTRY_LOG_LEVEL`` (a level name such as ``DEBUG``)
and falls back to ``INFO``.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "ach_entry"
LEVEL_ENV_VAR = "ACH_ENTRY_LOG_LEVEL"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _level_from_env() -> int:
    name = (os.getenv(LEVEL_ENV_VAR) or "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    # Unknown names come back as "Level <name>".
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: int | None = None) -> None:
    """Send ``ach_entry`` records to stderr; repeated calls are no-ops."""

    logger = logging.getLogger(LOGGER_NAME)
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else _level_from_env())
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


def reset_logging() -> None:
    """Drop every handler from the ``ach_entry`` logger (used by tests)."""

    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


__all__ = ["configure_logging", "get_logger", "reset_logging"]
