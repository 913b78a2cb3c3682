from enum import Enum
from habitboard.core.errors import DomainError, ErrorKind


class HabitErrorCode(str, Enum):
    AUTH_ERROR = "AUTH_ERROR"
    TASK_INSERT_ERROR = "TASK_INSERT_ERROR"
    TASK_DELETE_ERROR = "TASK_DELETE_ERROR"
    TASK_UPDATE_ERROR = "TASK_UPDATE_ERROR"
    TASK_FETCH_ERROR = "TASK_FETCH_ERROR"
    UNKNOWN = "UNKNOWN"


class HabitError(DomainError):
    kind = ErrorKind.HABIT

    def __init__(self, message: str, code: HabitErrorCode):
        super().__init__(message, code)
