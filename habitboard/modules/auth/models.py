# Supabase Auth
# This module uses Supabase's built-in authentication system.
# Tokens are issued to the dashboard client by Supabase directly; this
# service only resolves the bearer token back to a user id.

"""
Supabase Auth provides:
- auth.get_user(jwt=...) - Get current user from JWT token

The user id returned here is the `user_id` stored on group_members,
profiles and habits rows.
"""
