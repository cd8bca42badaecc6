"""
Shared Supabase client.
"""

from functools import lru_cache

from supabase import create_client, Client, ClientOptions

from marketplace.config import get_settings


@lru_cache()
def get_supabase_client() -> Client:
    """
    Get cached Supabase client.
    PKCE flow is enabled so OAuth sign-in can finish with a code exchange.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=ClientOptions(flow_type="pkce")
    )
