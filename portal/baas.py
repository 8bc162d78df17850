"""
Supabase client construction.

The anon client is safe to hand to browser-side code paths; the service
client bypasses row-level security and must only be used server-side.
"""

from __future__ import annotations

from supabase import Client, ClientOptions, create_client

from portal.config import Settings


class MissingCredentialsError(RuntimeError):
    """Raised when a Supabase client cannot be built from the environment."""


def create_anon_client(settings: Settings) -> Client:
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise MissingCredentialsError("Missing Supabase URL or anon key")
    return create_client(settings.supabase_url, settings.supabase_anon_key)


def create_service_client(settings: Settings) -> Client:
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise MissingCredentialsError("Missing Supabase service role credentials")
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
