"""Tests for application configuration."""

import pytest
from pydantic import ValidationError

from litcode_tutor.config import Environment, Settings, get_settings


class TestSettings:
    """Test Settings model validation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings loads with all defaults (no env vars needed)."""
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        s = Settings(_env_file=None)
        assert s.environment == Environment.DEVELOPMENT
        assert s.gemini_default_model == "gemini-2.5-flash"
        assert s.openai_default_model == "gpt-4o"
        assert s.openai_base_url is None
        assert s.request_timeout_s == 60.0
        assert s.is_prod is False

    def test_no_api_key_fields(self) -> None:
        """Credentials are supplied per call, never via settings."""
        assert not any("api_key" in name for name in Settings.model_fields)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLAUDE_DEFAULT_MODEL", "claude-test")
        monkeypatch.setenv("REQUEST_TIMEOUT_S", "5")
        monkeypatch.setenv("MAX_TOKENS", "200")
        s = Settings(_env_file=None)
        assert s.claude_default_model == "claude-test"
        assert s.request_timeout_s == 5.0
        assert s.max_tokens == 200

    def test_environment_enum(self) -> None:
        s = Settings(environment="production", _env_file=None)  # type: ignore[arg-type]
        assert s.environment is Environment.PRODUCTION
        assert s.is_prod is True

    def test_testing_environment(self) -> None:
        s = Settings(environment="testing", _env_file=None)  # type: ignore[arg-type]
        assert s.environment is Environment.TESTING
        assert s.is_prod is False

    def test_invalid_environment(self) -> None:
        with pytest.raises(ValidationError):
            Settings(environment="invalid", _env_file=None)  # type: ignore[arg-type]

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(request_timeout_s=0, _env_file=None)

    def test_temperature_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Settings(temperature=3.0, _env_file=None)


class TestGetSettings:
    def test_cached(self) -> None:
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
