"""Bearer token guard.

Turns the value of an ``Authorization`` header into either an
authenticated principal or a rejection. The guard makes exactly one
verification attempt per request and performs no role checks; handlers
layer those on top of the principal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from tessera_auth.errors import AuthError
from tessera_auth.schemas import ClaimSet
from tessera_auth.services.token_service import TokenService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


class GuardState(str, Enum):
    """Where a request ended up while passing the guard."""

    NO_HEADER = "no_header"
    MALFORMED_HEADER = "malformed_header"
    TOKEN_PRESENT_UNVERIFIED = "token_present_unverified"
    VERIFIED = "verified"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Authenticated:
    """The request carries a valid token; ``principal`` is its claims."""

    principal: ClaimSet


@dataclass(frozen=True)
class Rejected:
    """The request may not continue."""

    reason: AuthError


GuardOutcome = Union[Authenticated, Rejected]


def extract_bearer_token(authorization: str | None) -> tuple[GuardState, str | None]:
    """Split an ``Authorization`` header value of the form ``Bearer <token>``.

    The scheme is case-sensitive, separated by a single space, and the
    token must be non-empty and contain no whitespace.
    """
    if authorization is None:
        return GuardState.NO_HEADER, None

    scheme, sep, token = authorization.partition(" ")
    if scheme != BEARER_SCHEME or not sep or not token:
        return GuardState.MALFORMED_HEADER, None
    if any(ch.isspace() for ch in token):
        return GuardState.MALFORMED_HEADER, None

    return GuardState.TOKEN_PRESENT_UNVERIFIED, token


class BearerTokenGuard:
    """Per-request authentication gate."""

    def __init__(self, token_service: TokenService):
        self._token_service = token_service

    def authorize(self, authorization: str | None) -> GuardOutcome:
        state, token = extract_bearer_token(authorization)
        if token is None:
            logger.debug("Guard rejected request: %s", state.value)
            return Rejected(AuthError.no_token_provided())

        verification = self._token_service.verify(token)
        if verification.claims is None:
            logger.debug("Guard rejected request: %s", GuardState.REJECTED.value)
            return Rejected(AuthError.invalid_token())

        logger.debug(
            "Guard %s subject: %s",
            GuardState.VERIFIED.value,
            verification.claims.subject_id,
        )
        return Authenticated(verification.claims)
