from __future__ import annotations

import sys

from loguru import logger

DEFAULT_LEVEL = "WARNING"
LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr so it never mixes with menu text."""
    logger.remove()
    logger.add(sys.stderr, level=(level or DEFAULT_LEVEL).upper())


__all__ = ["configure_logging", "DEFAULT_LEVEL", "LEVELS"]
