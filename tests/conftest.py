import logging

import pytest
from commit_colour.core.log import get_logger


@pytest.fixture(autouse=True)
def _reset_logger():
    """--debug attaches a stderr handler; drop it so it can't outlive capsys."""
    yield
    logger = get_logger()
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
