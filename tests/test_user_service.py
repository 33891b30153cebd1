"""
Account creation and recent-user reads.

The auth call decides success; the profile upsert and the AddedEmail insert
run on the session handle and may fail without failing the creation.
"""

from unittest import TestCase

from admin_panel.modules.profiles.schemas import ProfileRole
from admin_panel.modules.users.schemas import NewProfileData
from admin_panel.modules.users.service import UserService, DUPLICATE_USER_MESSAGE
from tests.fakes import make_handles, profile_row


class CreateUserTests(TestCase):
    def setUp(self):
        self.db, self.session, self.admin = make_handles()
        self.service = UserService(self.session, self.admin, access_token="token-123")

    def test_invalid_email_makes_no_calls(self):
        result = self.service.create_user_with_email("bad-email", "123456")
        self.assertEqual(result.error, "Invalid email format")
        self.assertIsNone(result.user)
        self.assertEqual(self.admin.auth.admin.created, [])
        self.assertEqual(self.db.calls, [])

    def test_trailing_newline_email_makes_no_calls(self):
        result = self.service.create_user_with_email("user@example.com\n", "123456")
        self.assertEqual(result.error, "Invalid email format")
        self.assertEqual(self.admin.auth.admin.created, [])
        self.assertEqual(self.db.calls, [])

    def test_short_password_rejected_before_auth(self):
        result = self.service.create_user_with_email("user@example.com", "short")
        self.assertIn("at least 6 characters", result.error)
        self.assertEqual(self.admin.auth.admin.created, [])

    def test_creates_confirmed_account_with_admin_handle(self):
        result = self.service.create_user_with_email(
            "New.User@Example.com",
            "s3cret!!",
            NewProfileData(first_name="Ada", last_name="Lovelace", role=ProfileRole.TUTOR)
        )
        self.assertTrue(result.ok)
        self.assertEqual(result.user.id, "user-1")

        attrs = self.admin.auth.admin.created[0]
        self.assertTrue(attrs["email_confirm"])
        self.assertEqual(attrs["user_metadata"], {"created_by_admin": True})
        self.assertEqual(self.session.auth.admin.created, [])

        profile = self.db.tables["profiles"][0]
        self.assertEqual(profile["id"], "user-1")
        self.assertEqual(profile["email"], "new.user@example.com")
        self.assertEqual(profile["role"], "Tutor")
        self.assertEqual(profile["phone_number"], "")

        upsert = self.db.calls_for("profiles", "upsert")[0]
        self.assertEqual(upsert.handle, "session")
        self.assertEqual(upsert.on_conflict, "id")

        tracked = self.db.tables["AddedEmail"][0]
        self.assertEqual(tracked["email"], "new.user@example.com")
        self.assertEqual(tracked["created_by"], "user-1")
        self.assertEqual(tracked["first_name"], "Ada")

    def test_role_defaults_to_learner_and_blank_names(self):
        self.service.create_user_with_email("user@example.com", "123456")
        profile = self.db.tables["profiles"][0]
        self.assertEqual(profile["role"], "Learner")
        self.assertEqual(profile["first_name"], "")
        self.assertIsNone(self.db.tables["AddedEmail"][0]["first_name"])

    def test_duplicate_account_messages_are_normalized(self):
        for provider_message in (
            "A user with this email address has already registered",
            "User already registered",
            "Email address already exists",
            "USER ALREADY EXISTS",
        ):
            self.admin.auth.admin.error = provider_message
            result = self.service.create_user_with_email("user@example.com", "123456")
            self.assertEqual(result.error, DUPLICATE_USER_MESSAGE)
            self.assertEqual(result.error, "User with this email already exists")

    def test_other_provider_errors_are_prefixed(self):
        self.admin.auth.admin.error = "rate limited"
        result = self.service.create_user_with_email("user@example.com", "123456")
        self.assertEqual(result.error, "Failed to create user: rate limited")
        self.assertEqual(self.db.calls, [])

    def test_missing_user_in_response(self):
        self.admin.auth.admin.return_user = False
        result = self.service.create_user_with_email("user@example.com", "123456")
        self.assertEqual(result.error, "Failed to create user - no user data returned")

    def test_profile_upsert_failure_still_returns_user(self):
        self.db.fail("profiles", "upsert", "permission denied")
        result = self.service.create_user_with_email("user@example.com", "123456")
        self.assertTrue(result.ok)
        self.assertEqual(result.user.email, "user@example.com")
        self.assertEqual(len(self.db.tables["AddedEmail"]), 1)

    def test_tracking_insert_failure_still_returns_user(self):
        self.db.fail("AddedEmail", "insert", "permission denied")
        result = self.service.create_user_with_email("user@example.com", "123456")
        self.assertTrue(result.ok)
        self.assertEqual(len(self.db.tables["profiles"]), 1)

    def test_generate_password_uses_configured_length(self):
        self.assertEqual(len(self.service.generate_password()), 12)
        self.assertEqual(len(self.service.generate_password(20)), 20)


class RecentUsersTests(TestCase):
    def setUp(self):
        self.db, self.session, self.admin = make_handles()
        self.service = UserService(self.session, self.admin)

    def test_returns_ten_newest_from_admin_handle(self):
        self.db.tables["profiles"] = [
            profile_row(f"id-{i:02d}", f"u{i}@example.com", f"2024-01-{i + 1:02d}T00:00:00+00:00")
            for i in range(12)
        ]
        users = self.service.get_recent_users()
        self.assertEqual(len(users), 10)
        self.assertEqual(users[0].id, "id-11")
        self.assertEqual(users[-1].id, "id-02")

        call = self.db.calls_for("profiles", "select")[0]
        self.assertEqual(call.handle, "admin")
        self.assertEqual(call.limit, 10)
        self.assertTrue(call.descending)

    def test_failure_collapses_to_empty_list(self):
        self.db.fail("profiles", "select", "connection reset")
        self.assertEqual(self.service.get_recent_users(), [])

        result = self.service.fetch_recent_users()
        self.assertFalse(result.ok)
        self.assertEqual(result.error, "connection reset")

    def test_empty_table_is_not_an_error(self):
        result = self.service.fetch_recent_users()
        self.assertTrue(result.ok)
        self.assertEqual(result.rows, [])
