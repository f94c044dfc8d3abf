"""Logging configuration for GridGrep using loguru."""

import sys

from loguru import logger

PLAIN_FORMAT = "<level>{message}</level>"
DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Send gridgrep log messages to stderr.

    Warnings and errors are always shown. ``verbose`` adds progress messages
    and ``debug`` adds index construction details with source locations.
    """
    logger.remove()
    if debug:
        logger.add(sys.stderr, format=DEBUG_FORMAT, level="DEBUG", colorize=True)
        return
    logger.add(
        sys.stderr,
        format=PLAIN_FORMAT,
        level="INFO" if verbose else "WARNING",
        colorize=True,
    )
