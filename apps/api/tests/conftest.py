"""Pytest configuration and fixtures."""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure 'apps/api/src' is on sys.path for absolute 'api.*' imports
_TESTS_DIR = os.path.dirname(__file__)
_SRC_PATH = os.path.abspath(os.path.join(_TESTS_DIR, "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from api.main import app  # noqa: E402
from api.services import get_user_directory  # noqa: E402
from common.services.user_directory import InMemoryUserDirectory  # noqa: E402


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    """Create an empty user directory for a single test."""
    return InMemoryUserDirectory()


@pytest.fixture
def client(directory: InMemoryUserDirectory) -> TestClient:
    """Create a FastAPI test client backed by the test's own directory."""
    app.dependency_overrides[get_user_directory] = lambda: directory
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def registered(client: TestClient) -> TestClient:
    """Client with alice already registered."""
    response = client.post(
        "/register",
        json={"username": "alice", "email": "a@x.com", "password": "secret1"},
    )
    assert response.status_code == 201
    return client
