"""Logging setup: a single console handler on the package logger."""

from __future__ import annotations

import logging
import sys

FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str | int = "info") -> logging.Logger:
    logger = logging.getLogger("seatmap_server")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FORMAT))

    # Remove any pre-existing handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(handler)
    return logger
