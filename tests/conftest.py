import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so caplog sees records in later tests."""
    yield
    logger = logging.getLogger('strsearch')
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
