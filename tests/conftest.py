import pytest

from bignumber.options import options


@pytest.fixture(autouse=True)
def reset_options():
    options.reset()
    yield
    options.reset()
