"""FastAPI application factory.

Creates and configures the FastAPI application with the auth router and
the auth error handler.

API Versioning:
    All auth endpoints are versioned under the /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tessera import __version__
from tessera.presentation.api.dependencies import create_engine, create_session_maker
from tessera.presentation.api.errors import setup_exception_handlers
from tessera.presentation.api.routers import auth_router
from tessera_config.settings import Settings, get_settings
from tessera_identity.domain.shared.time import utc_now
from tessera_identity.infrastructure.persistence.sqlalchemy import Base

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Credential and token management.

**Registration & Login:**
- Register new accounts with username, email and password
- Login to obtain an access/refresh token pair
- Exchange a refresh token for a new access token

**Security:**
- Passwords are hashed with bcrypt
- Signed JWTs (HS256) for stateless authentication
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


def _configure_logging(settings: Settings) -> None:
    """Configure application logging.

    Console output with timestamps and module names; tessera packages log
    at the configured level, noisy third-party libraries at WARNING.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in ("tessera", "tessera_auth", "tessera_identity"):
        logging.getLogger(name).setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting %s API v%s...", app.state.settings.app_name, __version__)
    engine: AsyncEngine = app.state.engine
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down %s API...", app.state.settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create the users table if it does not exist yet."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_v1_router() -> APIRouter:
    """Create the v1 API router."""
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Credential and bearer token service.",
        version=__version__,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_maker = create_session_maker(app.state.engine)

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint, unversioned for load balancers."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "timestamp": utc_now().isoformat(),
        }

    return app
