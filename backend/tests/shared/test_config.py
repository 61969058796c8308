"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings()
        assert settings.app_name == "Task Tracker API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.host == "0.0.0.0"
        assert settings.app_version == "0.1.0"
        assert settings.frontend_url == "http://localhost:5173"

    def test_auth_defaults(self):
        settings = Settings()
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expires_days == 30
        assert settings.otp_length == 6
        assert settings.otp_ttl_minutes == 10

    def test_revenue_defaults(self):
        settings = Settings()
        assert settings.revenue_per_project == 50
        assert settings.currency_symbol == "$"

    def test_default_cors_origins_include_frontends(self):
        settings = Settings()
        assert "http://localhost:5173" in settings.cors_origins

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings()
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_secrets_from_env(self):
        with patch.dict(os.environ, {
            "JWT_SECRET": "env-secret",
            "RESEND_API_KEY": "re_test_key",
        }):
            settings = Settings()
            assert settings.jwt_secret == "env-secret"
            assert settings.resend_api_key == "re_test_key"

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings()
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"

    def test_cors_origins_parse_json_list(self):
        with patch.dict(os.environ, {"CORS_ORIGINS": '["https://app.example.com"]'}):
            settings = Settings()
            assert settings.cors_origins == ["https://app.example.com"]


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        # Clear the cache first
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
