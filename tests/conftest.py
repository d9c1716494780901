"""
Shared fixtures: a small test catalog and an app wired to it.
"""

import pytest
from fastapi.testclient import TestClient

from cafe_catalog.api.app import create_app
from cafe_catalog.repositories import InMemoryCatalogRepository
from cafe_catalog.services import CafeService

TEST_CATALOG = {
    "moscow": ["кофе-1", "кофе-2", "вилка"],
    "tula": ["Тульский пряник", "Самовар"],
    "empty": [],
}


@pytest.fixture
def catalog():
    """In-memory catalog with a few cities."""
    return InMemoryCatalogRepository(TEST_CATALOG)


@pytest.fixture
def service(catalog):
    """CafeService over the test catalog."""
    return CafeService.create(catalog=catalog)


@pytest.fixture
def client(catalog):
    """Test client running the app lifespan against the test catalog."""
    with TestClient(create_app(catalog=catalog)) as test_client:
        yield test_client
