"""Logging utilities for the Dockerfile generator.

Warnings and diagnostics go to stderr so that a dry run can print the
generated Dockerfile on stdout without interleaved log lines.
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

from loguru import logger

from dcgen.constants import LOG_LEVEL

DEBUG_LOG_FILE = Path(tempfile.gettempdir()) / "dcgen_debug.log"

CONSOLE_FORMAT = "<level>{level}: {message}</level>"
DEBUG_CONSOLE_FORMAT = (
    "<fg 100,100,100>[{time:HH:mm:ss}] {module}.{function}.{line}</> <level>{level}: {message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}"


def console_level(level: str) -> str:
    """Return the level if loguru knows it, otherwise INFO."""
    try:
        logger.level(level)
    except ValueError:
        return "INFO"
    return level


def setup_logging(debug_mode: bool = False) -> None:
    """Set up loguru sinks based on debug mode.

    Parameters
    ----------
    debug_mode : bool, optional
        Whether to log at DEBUG level and also write a debug log file, by default False

    """
    # Clear any existing sinks to prevent duplicates
    logger.remove()

    if debug_mode:
        logger.add(sys.stderr, format=DEBUG_CONSOLE_FORMAT, level="DEBUG")
        logger.add(DEBUG_LOG_FILE, format=FILE_FORMAT, level="DEBUG")
    else:
        level = console_level(LOG_LEVEL)
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)
        if level != LOG_LEVEL:
            logger.warning(f"Unknown log level '{LOG_LEVEL}', using {level}.")
