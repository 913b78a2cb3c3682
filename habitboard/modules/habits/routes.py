from fastapi import APIRouter, Depends, Response
from habitboard.core.dependencies import get_habit_gateway
from habitboard.core.schemas import status_code_for
from habitboard.modules.habits.schemas import (
    HabitTaskCreate, AddHabitTaskResult, TaskActionResult, HabitTasksResult
)
from habitboard.modules.habits.service import HabitTaskGateway

router = APIRouter(prefix="/habits", tags=["habits"])


@router.post("", response_model=AddHabitTaskResult, status_code=201)
async def add_habit_task(
    task_data: HabitTaskCreate,
    response: Response,
    gateway: HabitTaskGateway = Depends(get_habit_gateway)
):
    """Add a habit task for the current user in their group"""
    result = gateway.add_habit_task(task_data.name)
    response.status_code = status_code_for(result.error, success_status=201)
    return result


@router.get("", response_model=HabitTasksResult)
async def get_habit_tasks(
    response: Response,
    gateway: HabitTaskGateway = Depends(get_habit_gateway)
):
    """List every member of the current user's group with their tasks"""
    result = gateway.get_habit_tasks()
    response.status_code = status_code_for(result.error)
    return result


@router.delete("/{task_id}", response_model=TaskActionResult)
async def delete_habit_task(
    task_id: str,
    response: Response,
    gateway: HabitTaskGateway = Depends(get_habit_gateway)
):
    """Delete a habit task"""
    result = gateway.delete_habit_task(task_id)
    response.status_code = status_code_for(result.error)
    return result


@router.post("/{task_id}/complete", response_model=TaskActionResult)
async def mark_habit_complete(
    task_id: str,
    response: Response,
    gateway: HabitTaskGateway = Depends(get_habit_gateway)
):
    """Mark a habit task as completed"""
    result = gateway.mark_habit_complete(task_id)
    response.status_code = status_code_for(result.error)
    return result
