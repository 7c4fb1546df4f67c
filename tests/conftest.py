"""Pytest configuration and shared fixtures."""

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from car_api.app.core.config import Settings
from car_api.app.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a throwaway database."""
    return Settings(
        mongodb_url="mongodb://localhost:27017",
        mongodb_database="carros_test",
        mongodb_collection="carros",
        log_level="WARNING",
    )


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    """In-memory Motor-compatible client; ``close`` is recorded."""
    client = AsyncMongoMockClient()
    client.close = MagicMock()
    return client


@pytest.fixture
def collection(mongo_client, settings):
    return mongo_client[settings.mongodb_database][settings.mongodb_collection]


@pytest.fixture
def app(settings, mongo_client):
    return create_app(settings=settings, mongo_client=mongo_client)


@pytest.fixture
def client(app):
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_car() -> Dict[str, Any]:
    return {"marca": "Toyota", "modelo": "Corolla", "año": 2023}
