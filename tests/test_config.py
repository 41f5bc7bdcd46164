"""Test application settings."""
import pytest
from pydantic import ValidationError

from config import APP_MESSAGE, APP_STATUS, APP_VERSION, Settings


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("APP_ENV", "APP_HOST", "APP_PORT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.APP_ENV == "development"
        assert settings.APP_HOST == "0.0.0.0"
        assert settings.APP_PORT == 8080
        assert settings.LOG_LEVEL == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.APP_ENV == "production"
        assert settings.APP_PORT == 9000
        assert settings.LOG_LEVEL == "DEBUG"

    def test_payload_constants(self):
        assert APP_STATUS == "UP"
        assert APP_MESSAGE == "GitOps Demo Application is running!"
        assert APP_VERSION == "1.0"

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " warning ")

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "WARNING"

    def test_unknown_log_level_is_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
