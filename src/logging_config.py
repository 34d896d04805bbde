"""Logging setup for module-poet."""

from __future__ import annotations

import os
import sys

from loguru import logger

LOG_LEVEL_ENV = "POET_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"

_logging_configured = False


def setup_logging(level: str | None = None, *, force: bool = False) -> None:
    """Configure the global loguru logger with a single stderr sink.

    The level is taken from ``level``, then the ``POET_LOG_LEVEL`` environment
    variable, then ``WARNING``. Only the first call takes effect unless
    ``force`` is set, which lets the CLI raise verbosity after import.
    """
    global _logging_configured

    if _logging_configured and not force:
        return
    _logging_configured = True

    resolved = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LEVEL).upper()

    logger.remove()
    # sys.stderr is resolved per message; callers may redirect it after setup.
    logger.add(
        lambda message: sys.stderr.write(message),
        level=resolved,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
        ),
        colorize=sys.stderr.isatty(),
    )


__all__ = ["logger", "setup_logging"]
