"""
Logging setup for the command-line game.
The library modules only ever call logging.getLogger(__name__); the CLI decides
where records go. Output goes to stderr so it never mixes with the board on stdout.
"""

import logging
import sys
from typing import Optional, TextIO, Union

LOGGER_NAME = "mastermind"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[int, str] = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the package logger with a single stream handler."""
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    # Prevent duplicate handlers when called more than once
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
