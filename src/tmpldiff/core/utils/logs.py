"""Loguru sink setup for CLI runs"""

import sys

from loguru import logger


LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def configure_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a compact stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=None)
