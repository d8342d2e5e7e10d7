"""Authentication service for user registration, login and profile lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from tessera_auth import AuthError, PasswordHashingService, TokenPair, TokenService
from tessera_identity.domain.user import DuplicateIdentityError, User, UserRole

if TYPE_CHECKING:
    from tessera_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserResult:
    """Outcome of a use case returning a single user.

    Contract:
      - success: ``user`` is set, ``error`` is None
      - failure: ``user`` is None, ``error`` names the failure
    """

    user: User | None = None
    error: AuthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class LoginResult:
    """Outcome of register/login flows that also mint tokens."""

    user: User | None = None
    tokens: TokenPair | None = None
    error: AuthError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the User aggregate and its repository with the token service:
    - User registration
    - Login with username and password
    - Profile lookup for an authenticated subject

    Business failures are returned, not raised. Outcomes are logged per
    operation as success or failure; passwords and tokens never are.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        token_service: TokenService,
        password_service: PasswordHashingService | None = None,
    ):
        self._user_repo = user_repository
        self._token_service = token_service
        self._password_service = password_service or PasswordHashingService()

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> UserResult:
        # Username first; a taken username short-circuits the email check.
        if await self._user_repo.exists_by_username(username):
            _record("register", success=False)
            return UserResult(error=AuthError.duplicate_identity("Username"))

        if await self._user_repo.exists_by_email(email):
            _record("register", success=False)
            return UserResult(error=AuthError.duplicate_identity("Email"))

        user = User.create(
            username,
            email,
            password,
            role=role,
            hasher=self._password_service,
        )
        try:
            saved = await self._user_repo.save(user)
        except DuplicateIdentityError as e:
            # Lost a race with a concurrent registration.
            _record("register", success=False)
            return UserResult(error=AuthError.duplicate_identity(e.field))

        _record("register", success=True)
        logger.info(
            "User registered: %s (role: %s)",
            saved.username,
            saved.role.value,
        )
        return UserResult(user=saved)

    async def authenticate(self, username: str, password: str) -> UserResult:
        # Unknown user and wrong password must be indistinguishable,
        # in the message and in the bcrypt work done.
        user = await self._user_repo.find_by_username(username)
        if user is None:
            self._password_service.verify_dummy(password)
            _record("login", success=False)
            return UserResult(error=AuthError.invalid_credentials())

        if not user.validate_password(password):
            _record("login", success=False)
            return UserResult(error=AuthError.invalid_credentials())

        _record("login", success=True)
        return UserResult(user=user)

    async def get_profile(self, user_id: UUID) -> UserResult:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            _record("profile", success=False)
            return UserResult(error=AuthError.not_found())

        _record("profile", success=True)
        return UserResult(user=user)

    async def register_and_issue(
        self,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> LoginResult:
        result = await self.register(username, email, password, role=role)
        return self._with_tokens(result)

    async def login(self, username: str, password: str) -> LoginResult:
        result = await self.authenticate(username, password)
        return self._with_tokens(result)

    def _with_tokens(self, result: UserResult) -> LoginResult:
        if result.user is None:
            return LoginResult(error=result.error)
        return LoginResult(
            user=result.user,
            tokens=self._token_service.issue_token_pair(result.user),
        )


def _record(operation: str, *, success: bool) -> None:
    logger.info(
        "auth operation %s: %s",
        operation,
        "success" if success else "failure",
    )
