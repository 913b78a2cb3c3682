# Supabase tables: group_members, profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

group_members:
- id: bigint (primary key)
- group_id: uuid (foreign key to groups.id, not null)
- user_id: uuid (foreign key to auth.users.id, not null)
- created_at: timestamp (default: now())

profiles:
- id: bigint (primary key)
- user_id: uuid (foreign key to auth.users.id, unique)
- display_name: text (nullable)

PostgREST embeds profiles into group_members rows through the shared
user_id. Depending on how the relationship is detected the embedded value
arrives as a single object, a list, or null; see schemas.normalize_profile.
"""
