"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Log level validation
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings, get_settings


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults_without_environment(self):
        """Test Settings loads with no environment variables set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.app_name == "session-cache"


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_upper_cased(self):
        """Test log_level accepts any case."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            settings = Settings()

        assert settings.log_level == "DEBUG"

    def test_log_level_invalid(self):
        """Test unknown log level raises ValidationError."""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert "Invalid log_level" in str(exc_info.value)

    def test_environment_invalid(self):
        """Test unknown environment raises ValidationError."""
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestEnvironmentDetection:
    """Test environment helper properties."""

    @pytest.mark.parametrize(
        ("value", "development"),
        [
            ("development", True),
            ("testing", False),
            ("ci", False),
            ("production", False),
        ],
    )
    def test_is_development(self, value, development):
        """Test is_development follows ENVIRONMENT."""
        with patch.dict(os.environ, {"ENVIRONMENT": value}, clear=True):
            settings = Settings()

        assert settings.is_development is development


class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance until cache_clear()."""
        get_settings.cache_clear()
        first = get_settings()
        second = get_settings()

        assert first is second

        get_settings.cache_clear()
        assert get_settings() is not first
