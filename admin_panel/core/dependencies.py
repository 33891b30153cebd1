"""
Core dependencies: operator authentication and the two Supabase handles.

The session handle carries the operator's JWT (RLS applies); the admin handle
uses the service_role key. Services receive both explicitly.
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from admin_panel.database.supabase_client import SupabaseClient, get_supabase, get_admin_supabase
from admin_panel.modules.auth.service import AuthService
from admin_panel.modules.users.service import UserService
from admin_panel.modules.profiles.service import ProfileService
from admin_panel.modules.added_emails.service import AddedEmailService
from supabase import Client

security = HTTPBearer()


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_token(
    credentials: HTTPAuthorizationCredentials = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    return credentials.credentials


def get_current_user_id(
    token: str = Depends(get_current_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current operator info from JWT token"""
    return auth_service.get_current_user(token)


def get_session_supabase(token: str = Depends(get_current_token)) -> Client:
    return SupabaseClient.get_session_client(token)


def get_user_service(
    token: str = Depends(get_current_token),
    supabase: Client = Depends(get_session_supabase),
    admin: Client = Depends(get_admin_supabase)
) -> UserService:
    return UserService(supabase, admin, access_token=token)


def get_profile_service(admin: Client = Depends(get_admin_supabase)) -> ProfileService:
    return ProfileService(admin)


def get_added_email_service(
    token: str = Depends(get_current_token),
    supabase: Client = Depends(get_session_supabase),
    admin: Client = Depends(get_admin_supabase)
) -> AddedEmailService:
    return AddedEmailService(supabase, admin, access_token=token)
