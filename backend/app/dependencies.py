import logging
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
from supabase import Client  # type: ignore
from app.config import Settings, get_settings
from app.schemas.user import Principal
from app.utils.exceptions import Forbidden, Unauthenticated

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_supabase_public(request: Request) -> Client:
    """Supabase client built with the anon key, used to verify tokens"""
    return request.app.state.supabase_public


def get_supabase_admin(request: Request) -> Client:
    """Supabase client built with the service role key, used for data access"""
    return request.app.state.supabase_admin


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    supabase: Client = Depends(get_supabase_public),
) -> Principal:
    """Resolve the caller from the bearer token via Supabase Auth"""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("Missing token")

    try:
        response = supabase.auth.get_user(credentials.credentials)
    except Exception as e:
        logger.warning(f"Token rejected by identity service: {str(e)}")
        raise Unauthenticated("Invalid token")

    user = getattr(response, "user", None) if response else None
    if not user:
        raise Unauthenticated("Invalid token")

    return Principal.from_auth_user(user)


def get_current_admin(
    current_user: Principal = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """Require an email on the admin allowlist"""
    email = (current_user.email or "").lower()
    if email not in settings.admin_emails:
        logger.warning(f"Admin access denied for {current_user.email}")
        raise Forbidden("Admin only")
    return current_user
