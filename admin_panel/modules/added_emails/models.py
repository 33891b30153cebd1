# Supabase table: AddedEmail
# Append-only tracking list; duplicates are accepted.

"""
Expected Supabase table structure:

AddedEmail:
- id: bigint (identity, primary key)
- email: text (lower-cased before writes)
- first_name: text (nullable)
- last_name: text (nullable)
- created_by: uuid (nullable, references auth.users.id)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
