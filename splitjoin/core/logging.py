"""loguru setup for the splitjoin command line tool."""

from __future__ import annotations

import sys

from loguru import logger

# Plain tool-style lines for normal runs; source locations once debugging.
SHORT_LOG_FORMAT = "<level>splitjoin: {level}: {message}</level>"
DEBUG_LOG_FORMAT = (
    "{time:HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
)

_DEBUG_LEVELS = frozenset({"TRACE", "DEBUG"})


def configure_logging(level: str, *, colorize: bool | None = None) -> int:
    """
    Replace every loguru sink with a single stderr sink at ``level``.

    Standard output carries the processed lines, so no sink ever targets it.
    ``colorize=None`` lets loguru decide from whether stderr is a terminal.
    """
    level = level.upper()
    logger.remove()
    return logger.add(
        sys.stderr,
        level=level,
        format=DEBUG_LOG_FORMAT if level in _DEBUG_LEVELS else SHORT_LOG_FORMAT,
        colorize=colorize,
        backtrace=False,
        diagnose=False,
    )
