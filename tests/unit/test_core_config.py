"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values (service boots without any environment)
- Loading from environment variables
- Validation (log level, page sizes, URLs)
- Environment-derived properties
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings, get_settings


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings defaults."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.default_page_size == 10
        assert settings.max_page_size == 500
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.log_level == "INFO"


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_normalized(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_trailing_slash_stripped_from_base_url(self):
        with patch.dict(
            os.environ, {"API_BASE_URL": "https://api.example.com/"}, clear=True
        ):
            settings = Settings(_env_file=None)

        assert settings.api_base_url == "https://api.example.com"

    def test_default_page_size_cannot_exceed_max(self):
        env_values = {"DEFAULT_PAGE_SIZE": "50", "MAX_PAGE_SIZE": "20"}
        with patch.dict(os.environ, env_values, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_page_size_must_be_positive(self):
        with patch.dict(os.environ, {"MAX_PAGE_SIZE": "0"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


@pytest.mark.unit
class TestEnvironmentProperties:
    """Test environment detection and log rendering choice."""

    def test_development_uses_console_logs(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "development"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_development is True
        assert settings.use_json_logs is False

    def test_testing_uses_json_logs(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "testing"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_testing is True
        assert settings.is_production is False
        assert settings.use_json_logs is True

    def test_log_json_override(self):
        env_values = {"ENVIRONMENT": "production", "LOG_JSON": "false"}
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings(_env_file=None)

        assert settings.is_production is True
        assert settings.use_json_logs is False


@pytest.mark.unit
class TestGetSettings:
    """Test the cached accessor."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
