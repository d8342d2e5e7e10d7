"""Unit tests for the bearer token guard."""

from datetime import timedelta
from uuid import uuid4

import pytest

from tessera_auth import (
    AuthErrorCode,
    Authenticated,
    BearerTokenGuard,
    GuardState,
    Rejected,
    TokenCodec,
    TokenService,
)
from tessera_auth.guard import extract_bearer_token

SECRET = "guard-test-secret"  # NOQA: S105


class TestExtractBearerToken:
    """Header parsing."""

    def test_missing_header(self):
        assert extract_bearer_token(None) == (GuardState.NO_HEADER, None)

    def test_valid_header(self):
        state, token = extract_bearer_token("Bearer abc123")

        assert state == GuardState.TOKEN_PRESENT_UNVERIFIED
        assert token == "abc123"

    @pytest.mark.parametrize(
        "header",
        [
            "",
            "Bearer",
            "Bearer ",
            "Token abc123",
            "bearer abc123",
            "Bearer  abc123",
            "Bearer abc 123",
            "Basic dXNlcjpwYXNz",
        ],
    )
    def test_malformed_header(self, header):
        assert extract_bearer_token(header) == (GuardState.MALFORMED_HEADER, None)


class TestBearerTokenGuard:
    """Tests for BearerTokenGuard.authorize."""

    def setup_method(self):
        self.codec = TokenCodec(secret_key=SECRET)
        self.guard = BearerTokenGuard(TokenService(codec=self.codec))
        self.claims = {
            "sub": str(uuid4()),
            "username": "carol",
            "email": "carol@example.com",
            "role": "USER",
        }

    def test_valid_token_is_authenticated(self):
        token = self.codec.encode(self.claims, timedelta(minutes=15))

        outcome = self.guard.authorize(f"Bearer {token}")

        assert isinstance(outcome, Authenticated)
        assert outcome.principal.identity_claims() == self.claims

    @pytest.mark.parametrize("header", [None, "Token abc", "Bearer", "Bearer "])
    def test_missing_or_malformed_header(self, header):
        outcome = self.guard.authorize(header)

        assert isinstance(outcome, Rejected)
        assert outcome.reason.code == AuthErrorCode.NO_TOKEN_PROVIDED
        assert outcome.reason.message == "No token provided"

    def test_unverifiable_token(self):
        outcome = self.guard.authorize("Bearer badtoken")

        assert isinstance(outcome, Rejected)
        assert outcome.reason.code == AuthErrorCode.INVALID_TOKEN
        assert outcome.reason.message == "Invalid token"

    def test_expired_token(self):
        token = self.codec.encode(self.claims, timedelta(seconds=-1))

        outcome = self.guard.authorize(f"Bearer {token}")

        assert isinstance(outcome, Rejected)
        assert outcome.reason.code == AuthErrorCode.INVALID_TOKEN
