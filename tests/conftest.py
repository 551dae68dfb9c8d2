"""Pytest configuration and shared fixtures."""

import pytest

from recurdate.config import reset_recurdate_config


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Reset the config singleton before and after each test for isolation.

    The config is a module-level singleton that persists across tests.
    """
    reset_recurdate_config()
    yield
    reset_recurdate_config()
