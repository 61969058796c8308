"""
Supabase client factory.

Every repository shares one client built with the service-role key.
Row level security is enabled without policies, so ownership is
enforced by the services, never by the database.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Return the process-wide Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is empty.
            Raised at startup so a misconfigured deploy never serves traffic.
    """
    global _client

    if _client is not None:
        return _client

    settings = settings or get_settings()
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
        )
        if not value
    ]
    if missing:
        raise RuntimeError(f"Supabase configuration missing: set {', '.join(missing)}")

    _client = create_client(settings.supabase_url, settings.supabase_service_role_key)
    return _client


def reset_client_cache() -> None:
    """Drop the cached client (tests, or after configuration changes)."""
    global _client
    _client = None
