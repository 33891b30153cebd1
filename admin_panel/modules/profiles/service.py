import logging
from supabase import Client
from admin_panel.core.clock import utc_now_iso
from admin_panel.core.results import FetchResult
from admin_panel.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from typing import List
from fastapi import HTTPException

logger = logging.getLogger(__name__)


class ProfileService:
    """Profile reads and edits. Runs on the admin client: the panel sees every row."""

    def __init__(self, admin: Client):
        self.admin = admin

    def fetch_profiles(self) -> FetchResult[ProfileResponse]:
        try:
            result = self.admin.table("profiles")\
                .select("*")\
                .order("created_at", desc=True)\
                .execute()
            profiles = [ProfileResponse(**row) for row in result.data or []]
            logger.info(f"Retrieved {len(profiles)} profiles")
            return FetchResult[ProfileResponse](rows=profiles)
        except Exception as e:
            logger.error(f"Error fetching profiles: {e}")
            return FetchResult[ProfileResponse](error=str(e) or type(e).__name__)

    def get_user_profiles(self) -> List[ProfileResponse]:
        """All profiles, newest first; empty on failure"""
        return self.fetch_profiles().rows_or_empty()

    def update_user_profile(self, profile_id: str, profile_data: ProfileUpdate) -> ProfileResponse:
        """Write the supplied fields plus updated_at. Failures propagate."""
        try:
            update_data = profile_data.model_dump(exclude_unset=True, mode="json")
            if update_data.get("email"):
                update_data["email"] = update_data["email"].lower()
            update_data["updated_at"] = utc_now_iso()

            logger.info(f"Updating profile: {profile_id}")
            result = self.admin.table("profiles")\
                .update(update_data)\
                .eq("id", profile_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Profile not found")

            logger.info(f"Profile {profile_id} updated")
            return ProfileResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating profile {profile_id}: {e}")
            raise HTTPException(status_code=500, detail=str(e))
