"""
Pytest configuration for tessera_identity tests.

Provides users built with a low-cost hasher.
"""

import pytest

from tessera_identity.domain.user import User, UserRole


@pytest.fixture
def test_user(password_service) -> User:
    """Create a standard test user (password: ``secret123``)."""
    return User.create(
        "alice",
        "alice@example.com",
        "secret123",
        hasher=password_service,
    )


@pytest.fixture
def admin_user(password_service) -> User:
    """Create an admin test user (password: ``admin-pass``)."""
    return User.create(
        "root",
        "root@example.com",
        "admin-pass",
        role=UserRole.ADMIN,
        hasher=password_service,
    )
