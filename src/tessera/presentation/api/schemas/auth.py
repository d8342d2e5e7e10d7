"""Authentication schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from tessera_auth import ClaimSet
from tessera_auth.services.password_service import BCRYPT_MAX_BYTES
from tessera_identity import UserProfile, UserRole


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str = Field(..., min_length=1, max_length=150)
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=6,
        max_length=128,
        description="Password (min 6 characters, at most 72 bytes in UTF-8)",
    )
    role: UserRole | None = Field(default=None, description="User role")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            msg = f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes"
            raise ValueError(msg)
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "john_doe",
                "email": "john@example.com",
                "password": "password123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "john_doe",
                "password": "password123",
            },
        },
    )


class RefreshRequest(BaseModel):
    """Request schema for token refresh."""

    refresh_token: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    """User fields returned alongside freshly minted tokens."""

    id: UUID
    username: str
    email: str
    role: UserRole


class AuthResponse(BaseModel):
    """Response schema for successful registration or login."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserSummary


class AccessTokenResponse(BaseModel):
    """Response schema for token refresh."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int


class ProfileResponse(BaseModel):
    """Response schema for the current user's profile."""

    id: UUID
    username: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            username=profile.username,
            email=profile.email,
            role=profile.role,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class ClaimsResponse(BaseModel):
    """Verified claims in the shape other services rely on."""

    subject_id: str
    username: str
    email: str
    role: str
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def from_claims(cls, claims: ClaimSet) -> "ClaimsResponse":
        return cls(
            subject_id=claims.subject_id,
            username=claims.username,
            email=claims.email,
            role=claims.role,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )


class VerifyResponse(BaseModel):
    """Response schema for token verification."""

    valid: bool = True
    claims: ClaimsResponse
