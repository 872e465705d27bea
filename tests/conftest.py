"""Shared fixtures: a freshly seeded store and an API client with its own store."""

import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.database.seed import seed_store
from app.database.store import Store
from app.main import create_app


@pytest.fixture
def store() -> Store:
    return seed_store(Store())


@pytest.fixture
def empty_store() -> Store:
    return Store()


@pytest.fixture
def app_settings() -> Settings:
    return Settings(PROJECT_NAME="Test Board", SEED_DATA=True, LOG_LEVEL="WARNING")


@pytest.fixture
def client(app_settings: Settings) -> TestClient:
    return TestClient(create_app(app_settings))


@pytest.fixture
def api_store(client: TestClient) -> Store:
    """The store behind ``client``."""
    return client.app.state.store
