# Accounts: Supabase auth.users, created through auth.admin.create_user
# Every account gets a profiles row (see modules/profiles/models.py) and an
# AddedEmail tracking row (see modules/added_emails/models.py), both best effort.

"""
Account fields read back by this module:
- id: uuid
- email: text
- created_at: timestamp

Recent users are read from profiles (id, email, created_at) rather than
auth.users, so an account whose profile upsert failed does not show up there.
"""
