"""Root conftest — shared test configuration."""

import os

import pytest

# Tests never write rolling log files
os.environ.setdefault("LOG_TO_FILE", "false")

from first_program.core.di.service_locator import ServiceLocator  # noqa: E402


@pytest.fixture(autouse=True)
def reset_service_locator():
    """Every test starts with freshly built services."""
    ServiceLocator.reset()
    yield
    ServiceLocator.reset()
