import logging
from supabase import Client
from typing import Optional

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_user_id(self, token: Optional[str]) -> Optional[str]:
        """Resolve a Supabase access token to its user id, or None when it is missing or rejected"""
        if not token:
            return None
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.warning(f"Token rejected by Supabase Auth: {e}")
            return None
        if not user_response or not user_response.user:
            return None
        return user_response.user.id
