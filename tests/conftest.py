import logging

import pytest

from bracketeer.utils import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Drop stream handlers the CLI installs so later tests start silent."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if type(handler) is logging.StreamHandler:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)
