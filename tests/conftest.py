"""
Test Configuration and Fixtures
"""

import logging

import pytest

from ipcalc.config import set_config
from ipcalc.logging_config import reset_error_stats
from ipcalc.ip import cidr_to_range


@pytest.fixture(autouse=True)
def clean_state():
    """Reset package logging, error counters and config between tests"""
    yield
    logger = logging.getLogger("ipcalc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    reset_error_stats()
    set_config(None)


@pytest.fixture
def net():
    """Shorthand for building an AddressRange from CIDR text"""
    return cidr_to_range
