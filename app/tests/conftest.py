import pytest

from localization import set_default_formatter


@pytest.fixture(autouse=True)
def reset_default_formatter():
    """Make every test start without a cached default formatter."""
    set_default_formatter(None)
    yield
    set_default_formatter(None)
