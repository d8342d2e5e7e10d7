"""Tessera Identity - users, registration and login.

This module handles the identity side of authentication:
- User aggregate (identity fields, password hash, role)
- Registration, login and profile use cases
- User repository port and its implementations

Token minting and verification live in tessera_auth.
"""

from tessera_identity.application.services import (
    AuthenticationService,
    LoginResult,
    UserResult,
)
from tessera_identity.domain.user import (
    DuplicateIdentityError,
    User,
    UserProfile,
    UserRepository,
    UserRole,
)

__all__ = [
    # Domain - User
    "DuplicateIdentityError",
    "User",
    "UserProfile",
    "UserRepository",
    "UserRole",
    # Application Services
    "AuthenticationService",
    "LoginResult",
    "UserResult",
]
