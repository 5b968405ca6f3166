import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_logger():
    """Undo any handler/level changes a test makes to the package logger."""
    logger = logging.getLogger("reqlayer")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
