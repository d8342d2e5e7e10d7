"""Pydantic request/response schemas for the Tessera API."""

from tessera.presentation.api.schemas.auth import (
    AccessTokenResponse,
    AuthResponse,
    ClaimsResponse,
    LoginRequest,
    ProfileResponse,
    RefreshRequest,
    RegisterRequest,
    UserSummary,
    VerifyResponse,
)

__all__ = [
    "AccessTokenResponse",
    "AuthResponse",
    "ClaimsResponse",
    "LoginRequest",
    "ProfileResponse",
    "RefreshRequest",
    "RegisterRequest",
    "UserSummary",
    "VerifyResponse",
]
