# Supabase table: habits
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

habits:
- id: bigint (primary key, identity)
- group_id: uuid (foreign key to groups.id, not null)
- user_id: uuid (foreign key to auth.users.id, not null)
- name: text (not null)
- completed: boolean (nullable, default: false)
- created_at: timestamp (default: now())

The group of a habit is always taken from its creator's membership at
insert time. Rows are only ever completed, never un-completed.
"""
