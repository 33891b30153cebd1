from unittest import TestCase

from admin_panel.modules.added_emails.service import AddedEmailService
from tests.fakes import make_handles, added_email_row


class AddEmailTests(TestCase):
    def setUp(self):
        self.db, self.session, self.admin = make_handles(operator_id="operator-1")
        self.service = AddedEmailService(self.session, self.admin, access_token="token-123")

    def test_email_is_lowercased_and_attributed_to_operator(self):
        result = self.service.add_email_to_added_email("USER@EXAMPLE.COM", "Grace", "Hopper")
        self.assertTrue(result.success)
        self.assertIsNone(result.error)

        row = self.db.tables["AddedEmail"][0]
        self.assertEqual(row["email"], "user@example.com")
        self.assertEqual(row["created_by"], "operator-1")
        self.assertEqual(row["first_name"], "Grace")
        self.assertEqual(self.db.calls_for("AddedEmail", "insert")[0].handle, "session")
        self.assertEqual(self.session.auth.get_user_calls, ["token-123"])

    def test_blank_names_are_stored_as_null(self):
        self.service.add_email_to_added_email("user@example.com", "", "")
        row = self.db.tables["AddedEmail"][0]
        self.assertIsNone(row["first_name"])
        self.assertIsNone(row["last_name"])

    def test_unauthenticated_session_has_no_creator(self):
        self.session.auth.user_id = None
        self.service.add_email_to_added_email("user@example.com")
        self.assertIsNone(self.db.tables["AddedEmail"][0]["created_by"])

    def test_session_lookup_error_still_inserts(self):
        self.session.auth.get_user_error = "JWT expired"
        result = self.service.add_email_to_added_email("user@example.com")
        self.assertTrue(result.success)
        self.assertIsNone(self.db.tables["AddedEmail"][0]["created_by"])

    def test_duplicates_are_accepted(self):
        self.service.add_email_to_added_email("user@example.com")
        self.service.add_email_to_added_email("User@example.com")
        self.assertEqual(len(self.db.tables["AddedEmail"]), 2)

    def test_insert_failure_is_returned_not_raised(self):
        self.db.fail("AddedEmail", "insert", "duplicate key value")
        result = self.service.add_email_to_added_email("user@example.com")
        self.assertFalse(result.success)
        self.assertEqual(result.error, "duplicate key value")


class ListAddedEmailsTests(TestCase):
    def setUp(self):
        self.db, self.session, self.admin = make_handles()
        self.db.tables["AddedEmail"] = [
            added_email_row(1, "a@example.com", "2024-01-01T00:00:00+00:00"),
            added_email_row(2, "b@example.com", "2024-02-01T00:00:00+00:00", created_by="operator-1"),
        ]
        self.service = AddedEmailService(self.session, self.admin)

    def test_lists_newest_first_with_admin_handle(self):
        emails = self.service.get_all_added_emails()
        self.assertEqual([e.id for e in emails], [2, 1])
        self.assertEqual(emails[0].created_by, "operator-1")
        self.assertEqual(self.db.calls_for("AddedEmail", "select")[0].handle, "admin")

    def test_failure_collapses_to_empty(self):
        self.db.fail("AddedEmail", "select", "timeout")
        self.assertEqual(self.service.get_all_added_emails(), [])
        result = self.service.fetch_added_emails()
        self.assertFalse(result.ok)
        self.assertEqual(result.error, "timeout")
