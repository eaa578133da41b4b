# logging_config.py — Root logger setup
"""
logging_config.py — Logging Setup

Configures the root logger once per process. Records go to stderr so the
report written to stdout is never interleaved with log lines.
"""

from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Reset root handlers and install a single stderr stream handler.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level

    Returns:
        The configured root logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return logger
