import pytest

from ctfp.config import reload_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read CTFP_* variables for every test."""
    reload_settings()
    yield
    reload_settings()
