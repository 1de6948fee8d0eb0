"""Shared test fixtures and configuration."""
import pytest
import os
from pathlib import Path
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("DEFAULT_LANGUAGE", "de-CH")
os.environ.setdefault("DEFAULT_TENANT", "cafe-zueri")

from voice_order.main import app
from voice_order.core.dependencies import get_catalog_repository
from voice_order.services.menu.base import VoiceMenuMapping
from voice_order.services.menu.repository import CatalogRepository
from voice_order.services.menu.in_memory_menu import InMemoryCatalogProvider


@pytest.fixture
def test_catalog_path():
    """Return path to test catalog YAML file."""
    return Path(__file__).parent / "fixtures" / "test_catalog.yaml"


@pytest.fixture
async def test_catalog_repository(test_catalog_path):
    """Create catalog repository with test data."""
    provider = InMemoryCatalogProvider(catalog_file=str(test_catalog_path))
    return CatalogRepository(provider)


@pytest.fixture
def food_catalog():
    """Food-only catalog snapshot for matcher tests."""
    return [
        VoiceMenuMapping(canonical_id="kaffee", spoken_names=["kaffee", "kafi"], aliases=["schale"]),
        VoiceMenuMapping(canonical_id="cappuccino", spoken_names=["cappuccino"], aliases=["cappu"]),
        VoiceMenuMapping(canonical_id="croissant", spoken_names=["croissant", "gipfeli"]),
        VoiceMenuMapping(canonical_id="roesti", spoken_names=["rösti"], aliases=["röschti"]),
    ]


@pytest.fixture
def override_get_catalog_repository(test_catalog_repository):
    """Override get_catalog_repository dependency with test catalog."""
    def _override_get_catalog_repository():
        return test_catalog_repository
    return _override_get_catalog_repository


@pytest.fixture
def test_client(override_get_catalog_repository, monkeypatch):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_catalog_repository] = override_get_catalog_repository

    monkeypatch.setattr("voice_order.core.config.settings.default_tenant", "cafe-zueri")
    monkeypatch.setattr("voice_order.core.config.settings.default_language", "de-CH")

    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test"
    )
