"""Fixtures for end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from cfh.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client
