"""
Wall error kinds and the Result value returned by every service operation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class WallErrorKind(str, Enum):
    DUPLICATE_USERNAME = "duplicate_username"
    INVALID_CREDENTIALS = "invalid_credentials"
    NOT_AUTHENTICATED = "not_authenticated"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    INVALID_INPUT = "invalid_input"


DEFAULT_MESSAGES = {
    WallErrorKind.DUPLICATE_USERNAME: "Username already exists",
    WallErrorKind.INVALID_CREDENTIALS: "Incorrect username or password",
    WallErrorKind.NOT_AUTHENTICATED: "User is not authenticated",
    WallErrorKind.STORAGE_UNAVAILABLE: "Storage is unavailable",
    WallErrorKind.INVALID_INPUT: "Invalid input",
}


class WallError(Exception):
    """Recoverable domain failure. Converted to a failed Result at the service boundary."""

    def __init__(self, kind: WallErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class StorageUnavailable(WallError):
    """The persistent medium could not be read or written."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(WallErrorKind.STORAGE_UNAVAILABLE, message)


@dataclass
class Result(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[WallErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, err: WallError) -> "Result[T]":
        return cls(ok=False, error=err.kind, message=err.message)

    def __bool__(self) -> bool:
        return self.ok
