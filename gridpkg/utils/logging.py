"""Logging utilities for gridpkg.

Provides consistent and configurable logging for all gridpkg components,
with support for stream and file logging, formatting, and level control.
"""

import logging
import os
import sys
from typing import Optional, TextIO

from gridpkg.constants import DEFAULT_LOG_FORMAT


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure and return a logger.

    Args:
        name: Name of the logger
        level: Logging level (default: INFO)
        log_file: Optional path to a log file
        log_format: Optional format for log messages
        stream: Stream for the console handler (default: sys.stderr)

    Returns:
        Configured logger
    """
    if log_format is None:
        log_format = DEFAULT_LOG_FORMAT

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Drop existing handlers so repeated setup does not duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(file_handler)

    return logger


def level_from_name(level_name: str) -> int:
    """Translate a level name such as "DEBUG" into a logging level."""
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else logging.INFO
