import logging

import pytest

from nullable_struct.logging_config import LOGGER_NAME
from tests.helpers import make_declaration


@pytest.fixture
def point_declaration():
    return make_declaration("Point", ("x", "int"), ("y", "str"))


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and propagation changes made by setup_logging."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate
