import logging
from supabase import Client
from admin_panel.core.clock import utc_now_iso
from admin_panel.core.results import FetchResult
from admin_panel.modules.added_emails.schemas import AddedEmailResponse, AddEmailResult
from typing import List, Optional

logger = logging.getLogger(__name__)


class AddedEmailService:
    def __init__(self, supabase: Client, admin: Client, access_token: Optional[str] = None):
        self.supabase = supabase
        self.admin = admin
        self.access_token = access_token

    def _current_user_id(self) -> Optional[str]:
        """Account id behind the session client, None when it cannot be resolved"""
        try:
            response = self.supabase.auth.get_user(jwt=self.access_token)
        except Exception as e:
            logger.warning(f"Could not resolve session user: {e}")
            return None
        user = getattr(response, "user", None) if response else None
        return user.id if user else None

    def add_email_to_added_email(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None
    ) -> AddEmailResult:
        """Insert a tracking row as the current operator. Never raises."""
        logger.info(f"Adding email to AddedEmail: {email}")
        try:
            now = utc_now_iso()
            self.supabase.table("AddedEmail").insert({
                "email": email.lower(),
                "first_name": first_name or None,
                "last_name": last_name or None,
                "created_by": self._current_user_id(),
                "created_at": now,
                "updated_at": now
            }).execute()
        except Exception as e:
            logger.error(f"Error adding to AddedEmail: {e}")
            return AddEmailResult(success=False, error=str(e) or "Failed to add email")

        logger.info("Email added to AddedEmail")
        return AddEmailResult(success=True)

    def fetch_added_emails(self) -> FetchResult[AddedEmailResponse]:
        try:
            result = self.admin.table("AddedEmail")\
                .select("*")\
                .order("created_at", desc=True)\
                .execute()
            emails = [AddedEmailResponse(**row) for row in result.data or []]
            logger.info(f"Retrieved {len(emails)} added emails")
            return FetchResult[AddedEmailResponse](rows=emails)
        except Exception as e:
            logger.error(f"Error fetching added emails: {e}")
            return FetchResult[AddedEmailResponse](error=str(e) or type(e).__name__)

    def get_all_added_emails(self) -> List[AddedEmailResponse]:
        return self.fetch_added_emails().rows_or_empty()
