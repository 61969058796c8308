"""
Centralized configuration for the Task Tracker backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced by prefix (e.g., OTP_*, JWT_*, RESEND_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Task Tracker API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = [
        "http://localhost:5173",
        "https://task-tracker-application-backend.vercel.app",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, only used by run_migrations.py

    # Tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 30

    # Email verification
    otp_length: int = 6
    otp_ttl_minutes: int = 10
    verified_email_ttl_hours: int = 72

    # Project metrics
    revenue_per_project: int = 50
    currency_symbol: str = "$"

    # Email delivery (Resend)
    resend_api_key: str = ""
    mail_from: str = "Task Tracker <onboarding@resend.dev>"
    support_email: str = "support@tasktracker.com"

    # Frontend URLs (for links in emails)
    frontend_url: str = "http://localhost:5173"

    # Notification dispatch policy
    notification_max_attempts: int = 3
    notification_retry_backoff_seconds: float = 1.0
    notification_shutdown_timeout_seconds: float = 5.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
