import logging
import re
from postgrest.exceptions import APIError
from supabase import Client
from habitboard.config.settings import settings
from habitboard.core.schemas import error_info
from habitboard.modules.auth.service import AuthService
from habitboard.modules.groups.exceptions import GroupError
from habitboard.modules.groups.schemas import (
    GroupProfileResponse, GroupProfilesResult, display_name_of, profile_id_of
)
from habitboard.modules.groups.service import GroupService
from habitboard.modules.habits.exceptions import HabitError, HabitErrorCode
from habitboard.modules.habits.schemas import (
    AddHabitTaskResult, TaskActionResult, HabitTasksResult, GroupMember, Task
)
from typing import Optional, Union

logger = logging.getLogger(__name__)

SELF_DISPLAY_NAME = "You"
_INTEGER_KEY = re.compile(r"[+-]?[0-9]+")


def parse_task_id(task_id: str) -> Union[int, str]:
    """Convert a task id to the integer key of the habits table.

    Only an optional sign followed by ASCII digits counts as an integer.
    Anything else is passed through unchanged so the backend rejects it and
    the caller gets the operation's own error code.
    """
    text = task_id.strip()
    if _INTEGER_KEY.fullmatch(text):
        return int(text)
    return task_id


class HabitTaskGateway:
    """Habit CRUD for the dashboard, scoped to the caller behind ``access_token``.

    Every public method returns a result model and never raises: HabitError
    and GroupError become the result's ``error``, anything else is logged and
    reported as ``UNKNOWN``.
    """

    def __init__(
        self,
        supabase: Client,
        access_token: Optional[str],
        avatar_url: Optional[str] = None
    ):
        self.supabase = supabase
        self.access_token = access_token
        self.avatar_url = avatar_url or settings.default_avatar_url
        self.auth = AuthService(supabase)
        self.groups = GroupService(supabase)

    def _current_user_id(self) -> str:
        user_id = self.auth.get_user_id(self.access_token)
        if not user_id:
            raise HabitError("User not authenticated", HabitErrorCode.AUTH_ERROR)
        return user_id

    def add_habit_task(self, task_name: str) -> AddHabitTaskResult:
        """Create an incomplete task for the caller in the caller's group"""
        try:
            user_id = self._current_user_id()
            group_id = self.groups.resolve_group_id(user_id)

            try:
                result = self.supabase.table("habits").insert({
                    "group_id": group_id,
                    "user_id": user_id,
                    "name": task_name.strip(),
                    "completed": False
                }).execute()
            except APIError as e:
                logger.warning(f"Habit insert failed: {e}")
                raise HabitError("Failed to insert task", HabitErrorCode.TASK_INSERT_ERROR)

            if not result.data:
                raise HabitError("Failed to insert task", HabitErrorCode.TASK_INSERT_ERROR)

            return AddHabitTaskResult(success=True, id=str(result.data[0]["id"]))
        except (HabitError, GroupError) as e:
            return AddHabitTaskResult(success=False, error=error_info(e))
        except Exception:
            logger.exception("Unexpected error inserting habit")
            return AddHabitTaskResult(success=False, error=error_info(self._unknown()))

    def delete_habit_task(self, task_id: str) -> TaskActionResult:
        """Delete a task by id. Deleting a missing task succeeds."""
        try:
            self._current_user_id()
            logger.info(f"Deleting habit task {task_id}")
            try:
                self.supabase.table("habits")\
                    .delete()\
                    .eq("id", parse_task_id(task_id))\
                    .execute()
            except APIError as e:
                logger.warning(f"Habit delete failed for {task_id}: {e}")
                raise HabitError("Failed to delete task", HabitErrorCode.TASK_DELETE_ERROR)

            return TaskActionResult(success=True)
        except HabitError as e:
            return TaskActionResult(success=False, error=error_info(e))
        except Exception:
            logger.exception("Unexpected error deleting habit")
            return TaskActionResult(success=False, error=error_info(self._unknown()))

    def mark_habit_complete(self, task_id: str) -> TaskActionResult:
        """Set completed on a task. There is no way back to incomplete."""
        try:
            self._current_user_id()
            try:
                self.supabase.table("habits")\
                    .update({"completed": True})\
                    .eq("id", parse_task_id(task_id))\
                    .execute()
            except APIError as e:
                logger.warning(f"Habit update failed for {task_id}: {e}")
                raise HabitError("Failed to complete habit task", HabitErrorCode.TASK_UPDATE_ERROR)

            return TaskActionResult(success=True)
        except HabitError as e:
            return TaskActionResult(success=False, error=error_info(e))
        except Exception:
            logger.exception("Unexpected error completing habit")
            return TaskActionResult(success=False, error=error_info(self._unknown()))

    def get_habit_tasks(self) -> HabitTasksResult:
        """Every member of the caller's group with their tasks"""
        try:
            current_user_id = self._current_user_id()
            group_id = self.groups.resolve_group_id(current_user_id)
            member_rows = self.groups.list_members_with_profiles(group_id)

            logger.debug(f"Fetching habits for group {group_id}")
            try:
                result = self.supabase.table("habits")\
                    .select("id, name, user_id, completed")\
                    .eq("group_id", group_id)\
                    .execute()
            except APIError as e:
                logger.warning(f"Habit fetch failed for group {group_id}: {e}")
                raise HabitError("Failed to fetch habit tasks", HabitErrorCode.TASK_FETCH_ERROR)

            if result.data is None:
                raise HabitError("Failed to fetch habit tasks", HabitErrorCode.TASK_FETCH_ERROR)
            task_rows = result.data

            members = []
            for member in member_rows:
                if member.user_id == current_user_id:
                    name = SELF_DISPLAY_NAME
                else:
                    name = display_name_of(member.profile)
                tasks = [
                    Task(
                        id=str(row["id"]),
                        title=row["name"],
                        completed=row.get("completed") or False
                    )
                    for row in task_rows
                    if row.get("user_id") == member.user_id
                ]
                members.append(GroupMember(
                    id=member.user_id,
                    name=name,
                    avatar=self.avatar_url,
                    tasks=tasks,
                    last_checkin=""
                ))

            return HabitTasksResult(members=members)
        except (HabitError, GroupError) as e:
            return HabitTasksResult(error=error_info(e))
        except Exception:
            logger.exception("Unexpected error in get_habit_tasks")
            return HabitTasksResult(error=error_info(self._unknown()))

    def get_group_profiles(self) -> GroupProfilesResult:
        """Profile id and display name of everyone in the caller's group"""
        try:
            user_id = self._current_user_id()
            group_id = self.groups.resolve_group_id(user_id)
            rows = self.groups.list_group_profiles(group_id)
            return GroupProfilesResult(profiles=[
                GroupProfileResponse(
                    user_id=row.user_id,
                    profile_id=profile_id_of(row.profile),
                    display_name=display_name_of(row.profile)
                )
                for row in rows
            ])
        except (HabitError, GroupError) as e:
            return GroupProfilesResult(error=error_info(e))
        except Exception:
            logger.exception("Unexpected error fetching group profiles")
            return GroupProfilesResult(error=error_info(self._unknown()))

    @staticmethod
    def _unknown() -> HabitError:
        return HabitError("Unexpected error occurred", HabitErrorCode.UNKNOWN)
