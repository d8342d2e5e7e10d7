"""FastAPI dependency injection for the Tessera API.

Provides dependencies for:
- Settings and database sessions (held on ``app.state``)
- Password hashing, token service and guard instances
- The authentication service
- The current principal (bearer token guard)
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from tessera.presentation.api.errors import AuthErrorException
from tessera_auth import (
    BearerTokenGuard,
    ClaimSet,
    PasswordHashingService,
    Rejected,
    TokenCodec,
    TokenService,
)
from tessera_config.settings import Settings
from tessera_identity import AuthenticationService, UserRepository
from tessera_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


def get_api_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session
# -----------------------------------------------------------------------------


def create_engine(database_url: str) -> AsyncEngine:
    """
    Create the async database engine.

    In-memory SQLite gets a single shared connection, otherwise every
    pooled connection would see its own empty database.
    """
    if ":memory:" in database_url:
        return create_async_engine(
            database_url,
            echo=False,
            poolclass=StaticPool,
        )
    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Commits when the request handler finishes, rolls back on error.

    Yields
    ------
    AsyncSession for database operations
    """
    session_maker: async_sessionmaker[AsyncSession] = request.app.state.session_maker
    async with session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def get_token_service(settings: SettingsDep) -> TokenService:
    """Get token service configured with the signing secret from settings."""
    return TokenService(
        codec=TokenCodec(secret_key=settings.jwt_secret_key.get_secret_value()),
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_guard(token_service: TokenServiceDep) -> BearerTokenGuard:
    return BearerTokenGuard(token_service)


async def get_user_repository(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> UserRepository:
    return UserRepositorySQLAlchemy(session, password_service=password_service)


def get_authentication_service(
    token_service: TokenServiceDep,
    user_repository: UserRepository = Depends(get_user_repository),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates user registration, login, and profile lookup.
    """
    return AuthenticationService(
        user_repository=user_repository,
        token_service=token_service,
        password_service=password_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Principal (Bearer Token Guard)
# -----------------------------------------------------------------------------


# Raw Authorization header; the guard does the "Bearer <token>" parsing.
authorization_header = APIKeyHeader(
    name="Authorization",
    scheme_name="BearerAuth",
    description="Bearer token: `Bearer <access_token>`",
    auto_error=False,
)


def get_principal(
    request: Request,
    authorization: str | None = Depends(authorization_header),
    guard: BearerTokenGuard = Depends(get_guard),
) -> ClaimSet:
    """
    FastAPI dependency running the bearer token guard.

    On success the claims are attached to ``request.state.principal`` and
    returned. Rejections become 401 responses through the registered
    exception handler.
    """
    outcome = guard.authorize(authorization)
    if isinstance(outcome, Rejected):
        raise AuthErrorException(outcome.reason)

    request.state.principal = outcome.principal
    return outcome.principal


Principal = Annotated[ClaimSet, Depends(get_principal)]
