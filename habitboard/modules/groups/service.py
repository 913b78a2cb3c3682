import logging
from postgrest.exceptions import APIError
from supabase import Client
from habitboard.modules.groups.exceptions import GroupError, GroupErrorCode
from habitboard.modules.groups.schemas import MemberRow, normalize_profile
from typing import List

logger = logging.getLogger(__name__)


class GroupService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def resolve_group_id(self, user_id: str) -> str:
        """Return the group of the user's first membership row"""
        try:
            result = self.supabase.table("group_members")\
                .select("group_id")\
                .eq("user_id", user_id)\
                .execute()
        except APIError as e:
            logger.warning(f"Group lookup failed for user {user_id}: {e}")
            raise GroupError("No group found for user", GroupErrorCode.NO_GROUP)

        if not result.data or not result.data[0].get("group_id"):
            raise GroupError("No group found for user", GroupErrorCode.NO_GROUP)

        return result.data[0]["group_id"]

    def list_members_with_profiles(self, group_id: str) -> List[MemberRow]:
        """Members of a group with their embedded display names, in backend order"""
        try:
            result = self.supabase.table("group_members")\
                .select("user_id, profiles(display_name)")\
                .eq("group_id", group_id)\
                .execute()
        except APIError as e:
            logger.warning(f"Member fetch failed for group {group_id}: {e}")
            raise GroupError("Failed to fetch group members", GroupErrorCode.MEMBERS_FETCH_ERROR)

        if result.data is None:
            raise GroupError("Failed to fetch group members", GroupErrorCode.MEMBERS_FETCH_ERROR)

        logger.debug(f"Fetched {len(result.data)} members for group {group_id}")
        return [
            MemberRow(user_id=row["user_id"], profile=normalize_profile(row.get("profiles")))
            for row in result.data
        ]

    def list_group_profiles(self, group_id: str) -> List[MemberRow]:
        """Members of a group with profile id and display name"""
        try:
            result = self.supabase.table("group_members")\
                .select("user_id, profiles(id, display_name)")\
                .eq("group_id", group_id)\
                .execute()
        except APIError as e:
            logger.warning(f"Profile fetch failed for group {group_id}: {e}")
            raise GroupError("Failed to fetch group profiles", GroupErrorCode.GROUP_FETCH_ERROR)

        if result.data is None:
            raise GroupError("Failed to fetch group profiles", GroupErrorCode.GROUP_FETCH_ERROR)

        return [
            MemberRow(user_id=row["user_id"], profile=normalize_profile(row.get("profiles")))
            for row in result.data
        ]
