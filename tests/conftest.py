"""Pytest configuration and shared fixtures."""

import pytest

from caljal.config import reset_config
from caljal.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    configure_logging("WARNING")


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Weekend days and the holiday provider are a module-level singleton."""
    reset_config()
    yield
    reset_config()
