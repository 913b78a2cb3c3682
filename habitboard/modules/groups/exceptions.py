from enum import Enum
from habitboard.core.errors import DomainError, ErrorKind


class GroupErrorCode(str, Enum):
    NO_GROUP = "NO_GROUP"
    MEMBERS_FETCH_ERROR = "MEMBERS_FETCH_ERROR"
    GROUP_FETCH_ERROR = "GROUP_FETCH_ERROR"


class GroupError(DomainError):
    kind = ErrorKind.GROUP

    def __init__(self, message: str, code: GroupErrorCode):
        super().__init__(message, code)
