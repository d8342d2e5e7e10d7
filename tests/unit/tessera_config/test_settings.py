"""Unit tests for application settings."""

import pytest
from pydantic import SecretStr, ValidationError

from tessera_config import Settings, clear_settings_cache, get_settings
from tessera_config.settings import DEFAULT_JWT_SECRET


class TestSettings:
    """Defaults, environment overrides and secret validation."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.jwt_access_token_expire_minutes == 15
        assert settings.jwt_refresh_token_expire_days == 7
        assert settings.bcrypt_rounds == 12
        assert settings.jwt_secret_key.get_secret_value() == DEFAULT_JWT_SECRET

    def test_environment_variables_override(self, monkeypatch):
        monkeypatch.setenv("TESSERA_JWT_SECRET_KEY", "from-env")
        monkeypatch.setenv("TESSERA_JWT_ACCESS_TOKEN_EXPIRE_MINUTES", "30")
        monkeypatch.setenv("TESSERA_BCRYPT_ROUNDS", "4")

        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key.get_secret_value() == "from-env"
        assert settings.jwt_access_token_expire_minutes == 30
        assert settings.bcrypt_rounds == 4

    def test_secret_is_not_shown_in_repr(self):
        settings = Settings(_env_file=None, jwt_secret_key=SecretStr("hidden-value"))

        assert "hidden-value" not in repr(settings)

    def test_empty_secret_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            Settings(_env_file=None, jwt_secret_key=SecretStr(""))

    def test_default_secret_rejected_in_production(self):
        with pytest.raises(ValidationError, match="secure value outside development"):
            Settings(_env_file=None, environment="production")

    def test_default_secret_rejected_in_test_environment(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="test")

    def test_custom_secret_accepted_in_production(self):
        settings = Settings(
            _env_file=None,
            environment="production",
            jwt_secret_key=SecretStr("k" * 32),
        )

        assert settings.environment == "production"

    def test_short_secret_rejected_outside_development(self):
        for environment in ("test", "production"):
            with pytest.raises(ValidationError, match="at least 32 bytes"):
                Settings(
                    _env_file=None,
                    environment=environment,
                    jwt_secret_key=SecretStr("k" * 31),
                )

    def test_short_secret_allowed_in_development(self):
        settings = Settings(_env_file=None, jwt_secret_key=SecretStr("short"))

        assert settings.jwt_secret_key.get_secret_value() == "short"


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_clear_cache_rereads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("TESSERA_APP_NAME", "Renamed")
        clear_settings_cache()

        second = get_settings()

        assert second is not first
        assert second.app_name == "Renamed"
