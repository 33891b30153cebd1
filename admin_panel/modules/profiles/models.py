# Supabase table: profiles
# Rows are created by the users module (upsert on id) and edited here.

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id)
- email: text (lower-cased before writes)
- role: text (Learner | Parent | Tutor | Other)
- first_name: text
- last_name: text
- phone_number: text
- school: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
