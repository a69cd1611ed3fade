import logging

import pytest

from arrayextra.lib import log


@pytest.fixture
def letters():
    return ('a', 'b', 'c', 'd', 'e')


@pytest.fixture
def numbers():
    return (1, 2, 3, 4)


@pytest.fixture
def debug_log(caplog):
    """Capture the DEBUG records of the library logger"""
    caplog.set_level(logging.DEBUG, logger=log.LOGGER_NAME)
    yield caplog
    log.set_level(log.DEFAULT_LEVEL)
