"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # tessera_auth, tessera_config, CLI
    ├── tessera_identity/      # Identity domain tests (users, use cases)
    │   ├── unit/
    │   └── integration/       # SQLAlchemy repository on in-memory SQLite
    └── integration/
        └── api/               # FastAPI app through TestClient

Every test runs with a clean settings cache and without picking up a
developer's .env file.
"""

import os

import pytest

from tessera_auth import PasswordHashingService, TokenCodec, TokenService
from tessera_config import clear_settings_cache

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear cached settings and ignore TESSERA_* variables from the shell."""
    for key in list(os.environ):
        if key.startswith("TESSERA_"):
            monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Password hasher with low rounds for fast tests."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def token_codec() -> TokenCodec:
    return TokenCodec(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def token_service(token_codec) -> TokenService:
    return TokenService(codec=token_codec)
