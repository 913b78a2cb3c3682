from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from habitboard.core.schemas import ErrorInfo


class HabitTaskCreate(BaseModel):
    name: str


class Task(BaseModel):
    id: str
    title: str
    completed: bool = False


class GroupMember(BaseModel):
    id: str
    name: str
    avatar: str
    tasks: List[Task]
    last_checkin: str = Field("", alias="lastCheckin")

    model_config = ConfigDict(populate_by_name=True)


class AddHabitTaskResult(BaseModel):
    success: bool
    id: Optional[str] = None
    error: Optional[ErrorInfo] = None


class TaskActionResult(BaseModel):
    success: bool
    error: Optional[ErrorInfo] = None


class HabitTasksResult(BaseModel):
    members: Optional[List[GroupMember]] = None
    error: Optional[ErrorInfo] = None
