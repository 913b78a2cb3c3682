from pydantic import BaseModel
from typing import Optional, Union
from habitboard.core.errors import DomainError, ErrorKind
from habitboard.modules.groups.exceptions import GroupErrorCode
from habitboard.modules.habits.exceptions import HabitErrorCode


class ErrorInfo(BaseModel):
    kind: ErrorKind
    code: Union[HabitErrorCode, GroupErrorCode]
    message: str


def error_info(error: DomainError) -> ErrorInfo:
    return ErrorInfo(kind=error.kind, code=error.code, message=error.message)


_STATUS_BY_CODE = {
    HabitErrorCode.AUTH_ERROR: 401,
    GroupErrorCode.NO_GROUP: 404,
    HabitErrorCode.UNKNOWN: 500,
}


def status_code_for(error: Optional[ErrorInfo], success_status: int = 200) -> int:
    """HTTP status for a result; failures reported by Supabase itself map to 502"""
    if error is None:
        return success_status
    return _STATUS_BY_CODE.get(error.code, 502)
