"""
Unit tests for openrouter_contract/core/config.py - Settings Class and Singleton.
"""

import pytest
from pydantic import ValidationError


# =============================================================================
# Settings Class
# =============================================================================


class TestSettingsClassExists:
    """Tests for Settings class creation."""

    def test_settings_extends_base_settings(self):
        """Settings inherits from pydantic_settings.BaseSettings."""
        from pydantic_settings import BaseSettings

        from openrouter_contract.core.config import Settings

        assert issubclass(Settings, BaseSettings)


class TestSettingsDefaults:
    """Default values when no environment is set."""

    def test_service_name_default(self):
        from openrouter_contract.core.config import Settings

        assert Settings().service_name == "openrouter-contract"

    def test_environment_default(self):
        from openrouter_contract.core.config import Settings

        assert Settings().environment == "development"

    def test_log_level_default(self):
        from openrouter_contract.core.config import Settings

        assert Settings().log_level == "INFO"

    def test_optional_defaults_are_none(self):
        """Attribution headers and default model are unset by default."""
        from openrouter_contract.core.config import Settings

        settings = Settings()
        assert settings.http_referer is None
        assert settings.x_title is None
        assert settings.default_model is None


class TestSettingsEnvironment:
    """Loading from OPENROUTER_CONTRACT_ environment variables."""

    def test_env_prefix(self, monkeypatch):
        from openrouter_contract.core.config import Settings

        monkeypatch.setenv("OPENROUTER_CONTRACT_DEFAULT_MODEL", "openai/gpt-4o")
        monkeypatch.setenv("OPENROUTER_CONTRACT_X_TITLE", "My App")

        settings = Settings()
        assert settings.default_model == "openai/gpt-4o"
        assert settings.x_title == "My App"

    def test_env_is_case_insensitive(self, monkeypatch):
        from openrouter_contract.core.config import Settings

        monkeypatch.setenv("openrouter_contract_environment", "staging")

        assert Settings().environment == "staging"

    def test_unrelated_env_ignored(self, monkeypatch):
        from openrouter_contract.core.config import Settings

        monkeypatch.setenv("OPENROUTER_CONTRACT_UNKNOWN_FIELD", "value")

        assert not hasattr(Settings(), "unknown_field")


class TestSettingsValidators:
    """Field validators."""

    def test_log_level_is_normalized(self):
        from openrouter_contract.core.config import Settings

        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        from openrouter_contract.core.config import Settings

        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_invalid_environment_rejected(self):
        from openrouter_contract.core.config import Settings

        with pytest.raises(ValidationError):
            Settings(environment="qa")

    def test_http_referer_requires_scheme(self):
        from openrouter_contract.core.config import Settings

        with pytest.raises(ValidationError) as exc_info:
            Settings(http_referer="example.test")
        assert "http://" in str(exc_info.value)

    def test_https_referer_accepted(self):
        from openrouter_contract.core.config import Settings

        assert Settings(http_referer="https://example.test").http_referer == (
            "https://example.test"
        )


# =============================================================================
# Settings Singleton
# =============================================================================


class TestGetSettings:
    """get_settings() caching behaviour."""

    def test_returns_settings_instance(self):
        from openrouter_contract.core.config import Settings, get_settings

        assert isinstance(get_settings(), Settings)

    def test_returns_same_instance(self):
        from openrouter_contract.core.config import get_settings

        assert get_settings() is get_settings()

    def test_cache_clear_reloads_environment(self, monkeypatch):
        from openrouter_contract.core.config import get_settings

        first = get_settings()
        monkeypatch.setenv("OPENROUTER_CONTRACT_DEFAULT_MODEL", "mistralai/codestral")
        get_settings.cache_clear()

        second = get_settings()
        assert second is not first
        assert second.default_model == "mistralai/codestral"
