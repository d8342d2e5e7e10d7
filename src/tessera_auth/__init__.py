"""Tessera Auth - credential hashing, bearer tokens and the request guard.

This package is independent of any user storage. It handles:
- Password hashing (bcrypt)
- Signing and verifying JWT tokens
- Turning an Authorization header into a principal

Architecture:
    tessera_auth/
    ├── services/    # Pure logic (password hashing, token codec/service)
    ├── guard.py     # Bearer token guard
    ├── schemas.py   # Claim set, token pair and result types
    └── errors.py    # Error codes shared with tessera_identity
"""

from tessera_auth.errors import AuthError, AuthErrorCode, TokenDecodeError
from tessera_auth.guard import (
    Authenticated,
    BearerTokenGuard,
    GuardOutcome,
    GuardState,
    Rejected,
)
from tessera_auth.schemas import (
    AccessTokenResult,
    ClaimSet,
    TokenPair,
    TokenSubject,
    TokenVerification,
)
from tessera_auth.services import PasswordHashingService, TokenCodec, TokenService

__all__ = [
    # Services
    "PasswordHashingService",
    "TokenCodec",
    "TokenService",
    # Guard
    "Authenticated",
    "BearerTokenGuard",
    "GuardOutcome",
    "GuardState",
    "Rejected",
    # Schemas
    "AccessTokenResult",
    "ClaimSet",
    "TokenPair",
    "TokenSubject",
    "TokenVerification",
    # Errors
    "AuthError",
    "AuthErrorCode",
    "TokenDecodeError",
]
