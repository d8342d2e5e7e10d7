"""Authentication router for registration, login and token management."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from tessera.presentation.api.dependencies import (
    AuthService,
    Principal,
    TokenServiceDep,
)
from tessera.presentation.api.errors import AuthErrorException
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
from tessera_auth import AuthError, TokenService
from tessera_identity import LoginResult, UserRole

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(
    result: LoginResult,
    token_service: TokenService,
) -> AuthResponse:
    if result.user is None or result.tokens is None:
        raise AuthErrorException(result.error or AuthError.invalid_credentials())

    user = result.user
    return AuthResponse(
        access_token=result.tokens.access_token,
        refresh_token=result.tokens.refresh_token,
        expires_in=int(token_service.access_expire.total_seconds()),
        user=UserSummary(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role,
        ),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        409: {"description": "Username or email already exists"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    token_service: TokenServiceDep,
) -> AuthResponse:
    result = await auth_service.register_and_issue(
        username=request.username,
        email=request.email,
        password=request.password,
        role=request.role or UserRole.USER,
    )
    return _create_auth_response(result, token_service)


@router.post(
    "/login",
    summary="Login with username and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    token_service: TokenServiceDep,
) -> AuthResponse:
    result = await auth_service.login(request.username, request.password)
    return _create_auth_response(result, token_service)


@router.post(
    "/refresh",
    summary="Refresh access token",
    responses={
        200: {"description": "Token refreshed successfully"},
        401: {"description": "Invalid refresh token"},
    },
)
async def refresh(
    request: RefreshRequest,
    token_service: TokenServiceDep,
) -> AccessTokenResponse:
    """
    Exchange a refresh token for a new access token.

    The refresh token itself is not rotated and the user record is not
    re-read; the new access token carries the refresh token's claims.
    """
    result = token_service.refresh_access(request.refresh_token)
    if result.access_token is None:
        logger.info("auth operation refresh: failure")
        raise AuthErrorException(result.error or AuthError.invalid_token())

    logger.info("auth operation refresh: success")
    return AccessTokenResponse(
        access_token=result.access_token,
        expires_in=int(token_service.access_expire.total_seconds()),
    )


@router.get(
    "/profile",
    summary="Get current user profile",
    responses={
        200: {"description": "User profile retrieved successfully"},
        401: {"description": "Authentication required"},
        404: {"description": "User no longer exists"},
    },
)
async def get_profile(
    principal: Principal,
    auth_service: AuthService,
) -> ProfileResponse:
    try:
        user_id = UUID(principal.subject_id)
    except ValueError:
        raise AuthErrorException(AuthError.not_found()) from None

    result = await auth_service.get_profile(user_id)
    if result.user is None:
        raise AuthErrorException(result.error or AuthError.not_found())

    return ProfileResponse.from_profile(result.user.to_profile())


@router.get(
    "/verify",
    summary="Verify a bearer token (for other services)",
    responses={
        200: {"description": "Token is valid"},
        401: {"description": "Invalid token"},
    },
)
async def verify(principal: Principal) -> VerifyResponse:
    return VerifyResponse(claims=ClaimsResponse.from_claims(principal))
