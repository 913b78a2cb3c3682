from fastapi import APIRouter, Depends, Response
from habitboard.core.dependencies import get_habit_gateway
from habitboard.core.schemas import status_code_for
from habitboard.modules.groups.schemas import GroupProfilesResult
from habitboard.modules.habits.service import HabitTaskGateway

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("/me/profiles", response_model=GroupProfilesResult)
async def get_group_profiles(
    response: Response,
    gateway: HabitTaskGateway = Depends(get_habit_gateway)
):
    """List profiles of everyone in the current user's group"""
    result = gateway.get_group_profiles()
    response.status_code = status_code_for(result.error)
    return result
