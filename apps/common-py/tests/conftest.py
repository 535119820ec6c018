"""Pytest configuration for common-py tests."""

import pytest

from common.services.user_directory import InMemoryUserDirectory


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as fast unit tests without external services"
    )


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    """Create an empty user directory."""
    return InMemoryUserDirectory()


@pytest.fixture
def alice(directory: InMemoryUserDirectory) -> InMemoryUserDirectory:
    """Directory holding a single registered user, alice."""
    directory.register("alice", "a@x.com", "secret1")
    return directory
