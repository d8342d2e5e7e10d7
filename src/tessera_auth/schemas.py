"""Data classes exchanged by the token service and the guard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Protocol

from tessera_auth.errors import AuthError


class TokenSubject(Protocol):
    """Anything tokens can be minted for (the User aggregate satisfies it)."""

    @property
    def id(self) -> Any: ...

    @property
    def username(self) -> str: ...

    @property
    def email(self) -> str: ...

    @property
    def role(self) -> str: ...


@dataclass(frozen=True)
class ClaimSet:
    """Identity claims recovered from a verified token."""

    subject_id: str
    username: str
    email: str
    role: str
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ClaimSet:
        """Build from a decoded JWT payload.

        Raises KeyError, TypeError or ValueError when the payload does not
        have the expected structure.
        """
        fields = {}
        for name in ("sub", "username", "email", "role"):
            value = payload[name]
            if not isinstance(value, str):
                msg = f"Claim '{name}' must be a string"
                raise TypeError(msg)
            fields[name] = value

        return cls(
            subject_id=fields["sub"],
            username=fields["username"],
            email=fields["email"],
            role=fields["role"],
            issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc),
            expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
        )

    def identity_claims(self) -> dict[str, str]:
        """The signed identity fields, without timestamps."""
        return {
            "sub": self.subject_id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
        }

    def to_dict(self) -> dict[str, str]:
        """External shape relied on by other services."""
        return {
            "subject_id": self.subject_id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "issued_at": self.issued_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
        }


@dataclass(frozen=True)
class TokenPair:
    """Access and refresh token minted from the same claims."""

    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class TokenVerification:
    """Result of TokenService.verify.

    Contract:
      - success: ``claims`` is set, ``error`` is None
      - failure: ``claims`` is None, ``error`` is INVALID_TOKEN
    """

    claims: ClaimSet | None = None
    error: AuthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class AccessTokenResult:
    """Result of TokenService.refresh_access."""

    access_token: str | None = None
    error: AuthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
