"""Centralized logging configuration for the ``finance_wrapped`` package.

- ``configure_logging(...)`` attaches a single ``StreamHandler`` to the
  package root logger. Called once by the CLI at startup.
- ``get_logger(name)`` returns a module logger, making sure the package root
  logger has at least a ``NullHandler`` so library use stays silent.

Library modules never attach their own handlers.
"""

import logging
import os
import sys
from typing import IO, Optional

_PKG_LOGGER_NAME = "finance_wrapped"
LOG_LEVEL_ENV = "FINWRAP_LOG_LEVEL"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    env_val = os.getenv(LOG_LEVEL_ENV)
    if env_val:
        return _parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once.

    Args:
        level: Level as int or name (e.g. "INFO"). If None, uses the
            FINWRAP_LOG_LEVEL environment variable, otherwise WARNING.
        fmt: Optional format string
        stream: Output stream for the handler (defaults to stderr)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    numeric_level = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    # Avoid double emission via the root logger
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name with a silent default until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
