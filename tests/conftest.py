import pytest

from envconf.utils.logger import reset_logging


@pytest.fixture(autouse=True)
def _quiet_logging():
    reset_logging()
    yield
    reset_logging()
