"""Logging setup for the camarim CLI.

Application services log through ``logging.getLogger(__name__)``; this
module attaches a single stderr handler to the package logger.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "camarim"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route package logs to stderr: WARNING by default, INFO when verbose.

    Safe to call more than once; earlier handlers are replaced, not stacked.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return logger
