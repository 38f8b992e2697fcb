"""Logging setup shared by the command line tool and the HTTP app."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "mpags_cipher"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a Rich stderr handler to the package logger.

    Safe to call more than once; existing handlers are replaced so that
    repeated CLI invocations in one process do not duplicate output.

    Args:
        level: Minimum severity name (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger
