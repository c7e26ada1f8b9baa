"""Shared fixtures for the coordspace test suite."""

import pytest

from coordspace.config import settings


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore the package-wide settings after every test."""
    yield
    settings.reset()
