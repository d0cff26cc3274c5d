"""Logging configuration for stardew-hostswap."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Configure loguru with appropriate level.

    ``quiet`` wins over ``verbose``: only warnings and errors are shown.
    """
    logger.remove()
    if quiet:
        level = "WARNING"
    else:
        level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
