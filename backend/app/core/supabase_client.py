from supabase import create_client, Client  # type: ignore
from app.config import Settings, settings as default_settings


def get_supabase_client(settings: Settings = default_settings, use_service_role: bool = True) -> Client:
    """
    Build a Supabase client.

    Args:
        settings: Application settings holding the project URL and keys.
        use_service_role: When True (default), use the service role key so data
            access bypasses RLS restrictions intended for public clients. When
            False, use the anon key; that client is only used to verify tokens.
    """
    if use_service_role:
        key = settings.supabase_service_role_key
    else:
        key = settings.supabase_anon_key
    return create_client(settings.supabase_url, key)


def get_supabase_public_client(settings: Settings = default_settings) -> Client:
    """Get Supabase client with the anon key (token verification)"""
    return get_supabase_client(settings, use_service_role=False)


def get_supabase_admin_client(settings: Settings = default_settings) -> Client:
    """Get Supabase client with service role key (admin access)"""
    return get_supabase_client(settings, use_service_role=True)
