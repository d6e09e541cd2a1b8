"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Settings loading from environment variables
- Environment detection
- Validation (log level, API prefix, URLs)
- Default values
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from catalog.core.config import Environment, Settings, get_settings


@pytest.fixture
def base_test_env():
    """Base environment dict for config tests.

    Provides minimal required settings. Tests can override specific values
    by merging with this dict.
    """
    return {
        "DATABASE_URL": "postgresql+asyncpg://test",
        "SECRET_KEY": "k" * 32,
    }


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

    def test_defaults(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.api_prefix == "/api"
        assert settings.collection_packages == ["catalog.presentation.resources"]
        assert settings.anonymous_principal == "anonymous"
        assert settings.casbin_model_path is None
        assert settings.access_token_expire_minutes == 30

    def test_database_url_is_required(self):
        with patch.dict(os.environ, {"SECRET_KEY": "k" * 32}, clear=True):
            with pytest.raises(ValidationError, match="database_url"):
                Settings()

    def test_secret_key_is_required(self):
        with patch.dict(os.environ, {"DATABASE_URL": "postgresql+asyncpg://test"}, clear=True):
            with pytest.raises(ValidationError, match="secret_key"):
                Settings()

    def test_collection_packages_from_json_env(self, base_test_env):
        env_values = base_test_env | {
            "COLLECTION_PACKAGES": '["catalog.presentation.resources", "plugins.collections"]'
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.collection_packages == [
            "catalog.presentation.resources",
            "plugins.collections",
        ]


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_is_upper_cased(self, base_test_env):
        with patch.dict(os.environ, base_test_env | {"LOG_LEVEL": "debug"}, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_log_level_invalid(self, base_test_env):
        with patch.dict(os.environ, base_test_env | {"LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError, match="log_level"):
                Settings()

    def test_api_prefix_trailing_slash_removed(self, base_test_env):
        with patch.dict(os.environ, base_test_env | {"API_PREFIX": "/catalog/"}, clear=True):
            assert Settings().api_prefix == "/catalog"

    def test_api_prefix_may_be_empty_after_strip(self, base_test_env):
        with patch.dict(os.environ, base_test_env | {"API_PREFIX": "/"}, clear=True):
            assert Settings().api_prefix == ""

    def test_api_prefix_must_be_absolute(self, base_test_env):
        with patch.dict(os.environ, base_test_env | {"API_PREFIX": "api"}, clear=True):
            with pytest.raises(ValidationError, match="api_prefix"):
                Settings()

    def test_short_secret_key_rejected(self, base_test_env):
        with patch.dict(os.environ, base_test_env | {"SECRET_KEY": "short"}, clear=True):
            with pytest.raises(ValidationError, match="secret_key"):
                Settings()

    def test_api_base_url_trailing_slash_removed(self, base_test_env):
        env_values = base_test_env | {"API_BASE_URL": "https://catalog.example.com/"}
        with patch.dict(os.environ, env_values, clear=True):
            assert Settings().api_base_url == "https://catalog.example.com"


class TestEnvironmentDetection:
    """Test is_development / is_testing / is_production."""

    @pytest.mark.parametrize(
        "environment, dev, testing, prod",
        [
            ("development", True, False, False),
            ("testing", False, True, False),
            ("ci", False, False, False),
            ("production", False, False, True),
        ],
    )
    def test_environment_flags(self, base_test_env, environment, dev, testing, prod):
        with patch.dict(os.environ, base_test_env | {"ENVIRONMENT": environment}, clear=True):
            settings = Settings()

        assert settings.is_development is dev
        assert settings.is_testing is testing
        assert settings.is_production is prod


class TestGetSettings:
    """Test cached settings accessor."""

    def test_get_settings_is_cached(self, base_test_env):
        with patch.dict(os.environ, base_test_env, clear=True):
            get_settings.cache_clear()
            try:
                assert get_settings() is get_settings()
            finally:
                get_settings.cache_clear()
