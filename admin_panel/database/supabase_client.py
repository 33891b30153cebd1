from typing import Optional
from supabase import create_client, Client
from admin_panel.config.settings import settings


class SupabaseClient:
    """Two handles with different authority; never substitute one for the other.

    - client: anon key, scoped by RLS to whoever the request's JWT belongs to
    - service client: service_role key, bypasses RLS (admin reads, user creation)
    """
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS."""
        if cls._service_client is None:
            if not settings.supabase_service_role_key:
                raise RuntimeError(
                    "SUPABASE_SERVICE_ROLE_KEY is not configured; admin operations are unavailable"
                )
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client

    @classmethod
    def get_session_client(cls, access_token: Optional[str]) -> Client:
        """Anon-key client whose table calls carry the operator's JWT."""
        if not access_token:
            return cls.get_client()
        client = create_client(settings.supabase_url, settings.supabase_key)
        client.postgrest.auth(access_token)
        return client

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_admin_supabase() -> Client:
    return SupabaseClient.get_service_client()
