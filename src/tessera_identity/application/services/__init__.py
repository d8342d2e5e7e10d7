"""Application services for identity management."""

from tessera_identity.application.services.authentication_service import (
    AuthenticationService,
    LoginResult,
    UserResult,
)

__all__ = ["AuthenticationService", "LoginResult", "UserResult"]
