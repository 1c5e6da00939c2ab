"""Logger setup. Silent unless --debug asks for diagnostics on stderr."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = 'commit_colour'

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(stream=None) -> logging.Logger:
    """Attach a stderr handler at DEBUG level. Safe to call more than once."""
    logger = get_logger()
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return logger

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
