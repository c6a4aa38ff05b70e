"""Logging configuration for tree-to-excel."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr; stdout is kept for the final report.

    Verbose mode logs at DEBUG and names the emitting module.
    """
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG", format="{level.icon} {name}: {message}")
    else:
        logger.add(sys.stderr, level="INFO", format="{level.icon} {message}")
