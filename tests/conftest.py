"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from pizza_api.app.main import create_app
from pizza_api.app.services.catalog_service import CatalogService


@pytest.fixture
def catalog():
    """A freshly built default catalog"""
    return CatalogService.build()


@pytest.fixture
def client():
    """HTTP client bound to a new application instance"""
    with TestClient(create_app()) as test_client:
        yield test_client
