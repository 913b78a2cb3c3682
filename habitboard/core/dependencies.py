"""
Core dependencies for resolving the caller's token and building services
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from habitboard.database.supabase_client import get_supabase
from habitboard.modules.habits.service import HabitTaskGateway
from supabase import Client
from typing import Optional

# Missing credentials are reported by the gateway as AUTH_ERROR, not by FastAPI
security = HTTPBearer(auto_error=False)


def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> Optional[str]:
    """Extract JWT token from Authorization header, if any"""
    if credentials is None:
        return None
    return credentials.credentials


def get_habit_gateway(
    token: Optional[str] = Depends(get_access_token),
    supabase: Client = Depends(get_supabase)
) -> HabitTaskGateway:
    return HabitTaskGateway(supabase, token)
