"""Application settings loaded from environment variables.

Configuration sources (in priority order):
1. OS environment variables with the TESSERA_ prefix
2. The file named by TESSERA_ENV_FILE, or ./.env if present
3. Default values

Uses pydantic-settings for automatic type coercion and validation.
Settings are read once and then treated as read-only; the signing secret
is handed to the token codec at construction time rather than read from
module state.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"  # NOQA: S105

# HS256 wants a key at least as long as its 256-bit digest.
MIN_JWT_SECRET_BYTES = 32


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. TESSERA_ENV_FILE env var (full path)
    2. .env in the current working directory
    """
    env_file_path = os.environ.get("TESSERA_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if path.exists():
            return path

    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env

    return None


class Settings(BaseSettings):
    """Application configuration. Set via TESSERA_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="TESSERA_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Tessera"
    environment: Literal["development", "test", "production"] = "development"

    # JWT
    jwt_secret_key: SecretStr = SecretStr(DEFAULT_JWT_SECRET)
    jwt_access_token_expire_minutes: int = 15
    jwt_refresh_token_expire_days: int = 7

    # Password hashing
    bcrypt_rounds: int = 12

    # Database
    database_url: str = "sqlite+aiosqlite:///./tessera.db"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False

    # Logging
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _validate_production_secret(self) -> Settings:
        """Refuse a placeholder or short signing key outside development."""
        secret = self.jwt_secret_key.get_secret_value()
        if not secret:
            msg = "TESSERA_JWT_SECRET_KEY cannot be empty"
            raise ValueError(msg)
        if self.environment == "development":
            return self
        if secret == DEFAULT_JWT_SECRET:
            msg = (
                "TESSERA_JWT_SECRET_KEY must be set to a secure value outside "
                "development. Generate one with: tessera secrets generate"
            )
            raise ValueError(msg)
        if len(secret.encode("utf-8")) < MIN_JWT_SECRET_BYTES:
            msg = (
                f"TESSERA_JWT_SECRET_KEY must be at least {MIN_JWT_SECRET_BYTES} "
                "bytes outside development"
            )
            raise ValueError(msg)
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
