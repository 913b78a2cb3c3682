"""
Error primitives shared by the habit and group modules.

Each module defines a closed ``str`` Enum of codes and a ``DomainError``
subclass that carries one of them. Gateway operations never let these
escape; they are folded into an ``ErrorInfo`` (see core.schemas) on the
result instead.
"""

from enum import Enum


class ErrorKind(str, Enum):
    HABIT = "habit"
    GROUP = "group"


class DomainError(Exception):
    kind: ErrorKind

    def __init__(self, message: str, code: Enum):
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code.value})"
