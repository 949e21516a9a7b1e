import pytest

from rodo_audit.utils.rate_limit import limiter


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield
