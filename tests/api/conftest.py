"""Fixtures for the HTTP API tests."""
import pytest
from fastapi.testclient import TestClient

from facematch.infrastructure.dependencies import get_gallery
from facematch.main import app
from facematch.services.gallery import Gallery


@pytest.fixture
def gallery() -> Gallery:
    return Gallery(dimension=4)


@pytest.fixture
def client(gallery):
    """Test client with a fresh four-dimensional gallery per test."""
    app.dependency_overrides[get_gallery] = lambda: gallery
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
