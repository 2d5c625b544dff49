"""
Global test fixtures for the user service.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test settings writing logs to a temporary directory
- Registration payload factories
- FastAPI app and TestClient wired to the mock database
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway database and log directory."""
    from user_service.config import Settings

    return Settings(
        _env_file=None,
        mongodb_uri="mongodb://localhost:27017/test_users",
        environment="test",
        log_dir=str(tmp_path / "logs"),
    )


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    Provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def mock_users_db(mock_async_mongo_client, test_settings):
    """Provide the mock database the app uses."""
    return mock_async_mongo_client[test_settings.database_name]


@pytest.fixture
def users_collection(mock_users_db):
    """Provide the mock users collection."""
    return mock_users_db["users"]


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def ana_payload() -> dict:
    """Valid registration body."""
    return {
        "nome": "Ana",
        "email": "ana@x.com",
        "senha": "abcdef",
    }


@pytest.fixture
def ana_credentials(ana_payload) -> dict:
    """Login body matching ana_payload."""
    return {
        "email": ana_payload["email"],
        "senha": ana_payload["senha"],
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings, mock_async_mongo_client):
    """
    Create FastAPI app for testing, bound to the mock database.
    """
    from user_service.main import create_app

    return create_app(test_settings, mongo_client=mock_async_mongo_client)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Entering the client runs the lifespan, so the store handle is set up.
    """
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
