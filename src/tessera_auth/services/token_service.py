"""Token service: mints, verifies and rotates access/refresh tokens."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from tessera_auth.errors import AuthError, TokenDecodeError
from tessera_auth.schemas import (
    AccessTokenResult,
    ClaimSet,
    TokenPair,
    TokenSubject,
    TokenVerification,
)
from tessera_auth.services.token_codec import TokenCodec

logger = logging.getLogger(__name__)


class TokenService:
    """Mint and verify bearer tokens carrying identity claims.

    Verification is stateless: it checks signature, expiry and structure
    only, and never looks at a user store or revocation list. Any instance
    holding the same secret can validate any token, but a token stays valid
    until it expires even if the user's role or password changes.

    Access and refresh tokens carry identical claim fields and differ only
    in their expiry.
    """

    DEFAULT_ACCESS_EXPIRE_MINUTES = 15
    DEFAULT_REFRESH_EXPIRE_DAYS = 7

    def __init__(
        self,
        codec: TokenCodec,
        access_token_expire_minutes: int = DEFAULT_ACCESS_EXPIRE_MINUTES,
        refresh_token_expire_days: int = DEFAULT_REFRESH_EXPIRE_DAYS,
    ):
        self._codec = codec
        self._access_expire = timedelta(minutes=access_token_expire_minutes)
        self._refresh_expire = timedelta(days=refresh_token_expire_days)

    @property
    def access_expire(self) -> timedelta:
        return self._access_expire

    def issue_token_pair(self, user: TokenSubject) -> TokenPair:
        """Mint an access and a refresh token for ``user``."""
        claims = _claims_for(user)
        return TokenPair(
            access_token=self._codec.encode(claims, self._access_expire),
            refresh_token=self._codec.encode(claims, self._refresh_expire),
        )

    def verify(self, token: str) -> TokenVerification:
        """Verify a token and recover its claims.

        Expired, tampered and malformed tokens all yield the same
        INVALID_TOKEN error; the specific cause is only logged.
        """
        try:
            payload = self._codec.decode(token)
            claims = ClaimSet.from_payload(payload)
        except TokenDecodeError as e:
            logger.warning("Token rejected: %s", e.message)
            return TokenVerification(error=AuthError.invalid_token())
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Token rejected: malformed payload (%s)", e)
            return TokenVerification(error=AuthError.invalid_token())

        return TokenVerification(claims=claims)

    def refresh_access(self, refresh_token: str) -> AccessTokenResult:
        """Mint a new access token from a valid refresh token.

        The new token reuses the claims embedded in the refresh token, so
        profile or role changes made since it was issued are not picked up
        until the user logs in again.
        """
        verification = self.verify(refresh_token)
        if verification.claims is None:
            return AccessTokenResult(error=verification.error)

        access_token = self._codec.encode(
            verification.claims.identity_claims(),
            self._access_expire,
        )
        logger.debug(
            "Access token refreshed for subject: %s",
            verification.claims.subject_id,
        )
        return AccessTokenResult(access_token=access_token)


def _claims_for(user: TokenSubject) -> dict[str, Any]:
    role = user.role
    return {
        "sub": str(user.id),
        "username": user.username,
        "email": user.email,
        "role": getattr(role, "value", role),
    }
