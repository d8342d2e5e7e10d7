"""Tests for the tessera CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from tessera.presentation.cli.app import app

runner = CliRunner()


class TestSecretsGenerate:
    def test_prints_jwt_secret(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "TESSERA_JWT_SECRET_KEY=" in result.output

    def test_generates_fresh_secret_each_time(self):
        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert first != second


class TestServe:
    def test_serve_uses_settings_defaults(self):
        with patch("tessera.presentation.cli.app.uvicorn.run") as run:
            result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        args, kwargs = run.call_args
        assert args == ("tessera.presentation.api.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8000

    def test_serve_overrides(self):
        with patch("tessera.presentation.cli.app.uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "9001"])

        assert result.exit_code == 0
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        assert run.call_args.kwargs["port"] == 9001
