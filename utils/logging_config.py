"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys

# Top-level packages whose module loggers share the app handler
APP_LOGGERS = ("core", "features", "integrations", "ui", "utils", "app")


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the app loggers once and return the ``app`` logger."""
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        if logger.handlers:
            continue
        logger.setLevel(level)
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logging.getLogger("app")
