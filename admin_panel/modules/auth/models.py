# Supabase Auth
# Operators sign in with Supabase Auth; the panel never stores credentials.
# Accounts created through the panel live in auth.users as well.

"""
Supabase Auth provides:
- auth.sign_in_with_password() - Authenticate the operator
- auth.get_user() - Resolve the operator from a JWT
- auth.sign_out() - Logout
- auth.admin.create_user() - Create accounts (service_role key only)

auth.users columns used here: id, email, created_at, user_metadata, app_metadata.
"""
