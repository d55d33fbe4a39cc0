import pytest

from geovector.utils import logging as geovector_logging


@pytest.fixture(autouse=True)
def reset_warnings():
    """warn_once remembers messages process-wide; forget them between tests"""
    geovector_logging._WARNINGS.clear()
    yield
    geovector_logging._WARNINGS.clear()
