"""Logging configuration for docsift."""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(
    *,
    verbose: bool = False,
    log_file: str | Path | None = None,
    console: bool = True,
) -> None:
    """Configure loguru sinks.

    The TUI passes console=False: it owns the terminal, so only the file
    sink (if any) stays active while it runs.
    """
    logger.remove()
    if console:
        level = "DEBUG" if verbose else "WARNING"
        logger.add(sys.stderr, level=level, format="{level.icon} {message}")
    if log_file:
        logger.add(
            str(Path(log_file).expanduser()),
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}",
        )
