"""Authentication error kinds.

Operations in tessera_auth and tessera_identity do not raise for business
failures. They return a result object carrying either the value or one
``AuthError``. The transport layer maps ``AuthErrorCode`` to a response.

Messages are coarse: an unknown username and a wrong password
produce the same ``INVALID_CREDENTIALS`` message, and every token failure
(expired, tampered, malformed) produces the same ``INVALID_TOKEN`` message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AuthErrorCode(str, Enum):
    """Stable error categories exposed to callers."""

    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"
    NOT_FOUND = "NOT_FOUND"
    INVALID_TOKEN = "INVALID_TOKEN"
    NO_TOKEN_PROVIDED = "NO_TOKEN_PROVIDED"


@dataclass(frozen=True)
class AuthError:
    """An error outcome: a stable code plus a human-readable message."""

    code: AuthErrorCode
    message: str

    @classmethod
    def invalid_credentials(cls) -> AuthError:
        return cls(AuthErrorCode.INVALID_CREDENTIALS, "Invalid credentials")

    @classmethod
    def duplicate_identity(cls, field: str) -> AuthError:
        return cls(AuthErrorCode.DUPLICATE_IDENTITY, f"{field} already exists")

    @classmethod
    def not_found(cls) -> AuthError:
        return cls(AuthErrorCode.NOT_FOUND, "User not found")

    @classmethod
    def invalid_token(cls) -> AuthError:
        return cls(AuthErrorCode.INVALID_TOKEN, "Invalid token")

    @classmethod
    def no_token_provided(cls) -> AuthError:
        return cls(AuthErrorCode.NO_TOKEN_PROVIDED, "No token provided")


class TokenDecodeError(Exception):
    """Raised by TokenCodec when a token cannot be decoded.

    Internal to the codec/service seam. The detail is meant for logs only;
    TokenService turns every instance into ``AuthError.invalid_token()``.
    """

    def __init__(self, message: str = "Invalid or expired token"):
        self.message = message
        super().__init__(self.message)
