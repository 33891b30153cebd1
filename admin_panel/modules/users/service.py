import logging
from supabase import Client
from admin_panel.config.settings import settings
from admin_panel.core.clock import utc_now_iso
from admin_panel.core.passwords import generate_password
from admin_panel.core.results import FetchResult
from admin_panel.core.validation import is_valid_email, is_valid_password, MIN_PASSWORD_LENGTH
from admin_panel.modules.profiles.schemas import ProfileRole
from admin_panel.modules.users.schemas import (
    NewProfileData, CreatedUser, CreateUserResult, RecentUser
)
from typing import List, Optional

logger = logging.getLogger(__name__)

DUPLICATE_USER_MESSAGE = "User with this email already exists"


def is_duplicate_user_error(message: str) -> bool:
    lowered = message.lower()
    return "already registered" in lowered or "already exists" in lowered


class UserService:
    def __init__(self, supabase: Client, admin: Client, access_token: Optional[str] = None):
        self.supabase = supabase
        self.admin = admin
        self.access_token = access_token

    def generate_password(self, length: Optional[int] = None) -> str:
        return generate_password(length or settings.password_length)

    def create_user_with_email(
        self,
        email: str,
        password: str,
        profile_data: Optional[NewProfileData] = None
    ) -> CreateUserResult:
        """Create a confirmed account, then best-effort profile and AddedEmail rows.

        Only the auth call decides the outcome; the two table writes are logged
        on failure and otherwise ignored.
        """
        if not is_valid_email(email or ""):
            return CreateUserResult(error="Invalid email format")
        if not is_valid_password(password or ""):
            return CreateUserResult(error=f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        profile_data = profile_data or NewProfileData()
        logger.info(f"Creating user with email: {email}")

        try:
            auth_response = self.admin.auth.admin.create_user({
                "email": email,
                "password": password,
                "email_confirm": True,
                "user_metadata": {"created_by_admin": True}
            })
        except Exception as e:
            error_message = str(e)
            logger.error(f"Auth error creating user {email}: {error_message}")
            if is_duplicate_user_error(error_message):
                return CreateUserResult(error=DUPLICATE_USER_MESSAGE)
            return CreateUserResult(error=f"Failed to create user: {error_message}")

        user = getattr(auth_response, "user", None)
        if not user:
            logger.error(f"Auth returned no user for {email}")
            return CreateUserResult(error="Failed to create user - no user data returned")

        logger.info(f"User created in auth system: {user.id}")
        normalized_email = email.lower()
        self._upsert_profile(user.id, normalized_email, profile_data)
        self._track_added_email(user.id, normalized_email, profile_data)

        return CreateUserResult(user=CreatedUser(
            id=user.id,
            email=user.email or normalized_email,
            created_at=getattr(user, "created_at", None)
        ))

    def _upsert_profile(self, user_id: str, email: str, profile_data: NewProfileData) -> bool:
        now = utc_now_iso()
        role = profile_data.role or ProfileRole.LEARNER
        try:
            self.supabase.table("profiles").upsert({
                "id": user_id,
                "email": email,
                "role": role.value,
                "first_name": profile_data.first_name or "",
                "last_name": profile_data.last_name or "",
                "phone_number": profile_data.phone_number or "",
                "created_at": now,
                "updated_at": now
            }, on_conflict="id").execute()
        except Exception as e:
            logger.warning(f"Profile creation warning for {user_id}: {e}")
            return False
        logger.info(f"Profile created for {user_id}")
        return True

    def _track_added_email(self, user_id: str, email: str, profile_data: NewProfileData) -> bool:
        now = utc_now_iso()
        try:
            self.supabase.table("AddedEmail").insert({
                "email": email,
                "first_name": profile_data.first_name or None,
                "last_name": profile_data.last_name or None,
                "created_by": user_id,
                "created_at": now,
                "updated_at": now
            }).execute()
        except Exception as e:
            logger.warning(f"AddedEmail tracking warning for {user_id}: {e}")
            return False
        logger.info(f"AddedEmail record created for {user_id}")
        return True

    def fetch_recent_users(self, limit: Optional[int] = None) -> FetchResult[RecentUser]:
        """Most recently created profiles, newest first. Uses the admin client."""
        try:
            result = self.admin.table("profiles")\
                .select("id, email, created_at")\
                .order("created_at", desc=True)\
                .limit(limit or settings.recent_users_limit)\
                .execute()
            users = [RecentUser(**row) for row in result.data or []]
            logger.info(f"Retrieved {len(users)} recent users")
            return FetchResult[RecentUser](rows=users)
        except Exception as e:
            logger.error(f"Error fetching recent users: {e}")
            return FetchResult[RecentUser](error=str(e) or type(e).__name__)

    def get_recent_users(self, limit: Optional[int] = None) -> List[RecentUser]:
        return self.fetch_recent_users(limit).rows_or_empty()
