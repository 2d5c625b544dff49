"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for injecting
store failures into services and routes.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError


# =============================================================================
# Collection Mocks
# =============================================================================

@pytest.fixture
def failing_users_collection():
    """
    A users collection whose every operation fails as if MongoDB were down.
    """
    error = ServerSelectionTimeoutError("No servers found yet")
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=error)
    collection.insert_one = AsyncMock(side_effect=error)
    return collection


@pytest.fixture
def racing_users_collection():
    """
    A users collection where the email pre-check passes but the insert
    hits the unique index, as when a concurrent registration won.
    """
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(
        side_effect=DuplicateKeyError("E11000 duplicate key error collection: test_users.users")
    )
    return collection


@pytest.fixture
def override_users_collection(app):
    """
    Route all requests to the given collection.

    Usage:
        def test_something(client, override_users_collection, failing_users_collection):
            override_users_collection(failing_users_collection)
            response = client.post("/login", json={...})
    """
    from user_service.database.connections import get_users_collection

    def _override(collection):
        app.dependency_overrides[get_users_collection] = lambda: collection

    yield _override
    app.dependency_overrides.pop(get_users_collection, None)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert single-error response structure."""
    def _assert(response, status_code: int, error: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "error" in data
        if error:
            assert data["error"] == error
    return _assert


@pytest.fixture
def violation_paths():
    """Helper returning the field names of a validation error response."""
    def _paths(response) -> list[str]:
        assert response.status_code == 400
        return [violation["path"] for violation in response.json()["errors"]]
    return _paths
