"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from tessera.presentation.api.app import API_V1_PREFIX, create_app
from tessera_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test settings: in-memory database, cheap hashing, fixed secret."""
    return Settings(
        _env_file=None,
        environment="test",
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_url="sqlite+aiosqlite:///:memory:",
        bcrypt_rounds=4,
        api_debug=True,
    )


@pytest.fixture
def test_client(api_settings):
    """TestClient with the lifespan running, so the schema exists."""
    app = create_app(api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def registered_user_data() -> dict:
    return {
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret123",
    }


@pytest.fixture
def registered_user(test_client, api_v1_prefix, registered_user_data) -> dict:
    """Register a user and return the response body."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user) -> dict:
    return {"Authorization": f"Bearer {registered_user['access_token']}"}
