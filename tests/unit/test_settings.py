"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "BUSINESS_UTC_OFFSET_MINUTES",
    "CANCELLATION_CUTOFF_HOURS",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_supabase_fields_default_to_none(self, clean_env):
        """Supabase fields should default to None."""
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_service_role_key is None
        assert settings.supabase_anon_key is None

    def test_business_clock_defaults(self, clean_env):
        """Business calendar is UTC+05:30 with a 24 hour cancellation cutoff."""
        settings = Settings(_env_file=None)
        assert settings.business_utc_offset_minutes == 330
        assert settings.cancellation_cutoff_hours == 24

    def test_sentry_dsn_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.sentry_dsn is None


@pytest.mark.unit
class TestSettingsValidation:
    """Test field validators."""

    @pytest.mark.parametrize("env", ["development", "staging", "production", "test"])
    def test_valid_environments(self, clean_env, env):
        settings = Settings(environment=env, _env_file=None)
        assert settings.environment == env

    def test_environment_is_lowercased(self, clean_env):
        settings = Settings(environment="PRODUCTION", _env_file=None)
        assert settings.environment == "production"

    def test_invalid_environment_raises(self, clean_env):
        with pytest.raises(ValidationError) as exc_info:
            Settings(environment="invalid", _env_file=None)
        assert "Invalid environment" in str(exc_info.value)

    @pytest.mark.parametrize("offset", [-721, 841])
    def test_offset_out_of_range_raises(self, clean_env, offset):
        with pytest.raises(ValidationError):
            Settings(business_utc_offset_minutes=offset, _env_file=None)

    def test_negative_cutoff_raises(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(cancellation_cutoff_hours=-1, _env_file=None)


@pytest.mark.unit
class TestSettingsProperties:
    """Test computed helper properties."""

    def test_supabase_key_prefers_service_role(self, clean_env):
        settings = Settings(
            supabase_service_role_key="service",
            supabase_anon_key="anon",
            _env_file=None,
        )
        assert settings.supabase_key == "service"

    def test_supabase_key_falls_back_to_anon(self, clean_env):
        settings = Settings(supabase_anon_key="anon", _env_file=None)
        assert settings.supabase_key == "anon"

    def test_cors_origins_list(self, clean_env):
        settings = Settings(cors_allowed_origins=" https://a.example, ,https://b.example", _env_file=None)
        assert settings.cors_allowed_origins_list == ["https://a.example", "https://b.example"]

    def test_environment_flags(self, clean_env):
        settings = Settings(environment="production", _env_file=None)
        assert settings.is_production
        assert not settings.is_development
        assert not settings.is_test


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test that values are read from environment variables."""

    def test_reads_env_vars(self, clean_env, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
        monkeypatch.setenv("BUSINESS_UTC_OFFSET_MINUTES", "-300")
        monkeypatch.setenv("CANCELLATION_CUTOFF_HOURS", "12")

        settings = Settings(_env_file=None)

        assert settings.environment == "staging"
        assert settings.supabase_url == "https://test.supabase.co"
        assert settings.business_utc_offset_minutes == -300
        assert settings.cancellation_cutoff_hours == 12


@pytest.mark.unit
class TestGetSettings:
    """Test the cached accessor."""

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
