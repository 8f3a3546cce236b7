"""Operation outcomes and exceptions.

Store operations return an Outcome for the expected failure modes
(forbidden, not found, invalid input) so the HTTP layer can map them to
status codes. Only store I/O failures are raised, as UpstreamError.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class NavPortalError(Exception):
    """Base exception for navportal."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class UpstreamError(NavPortalError):
    """Raised when the persistent store fails to read or write."""
    pass


class Status(str, Enum):
    OK = "ok"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


@dataclass(frozen=True)
class Outcome:
    status: Status
    value: Any = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(Status.OK, value)

    @classmethod
    def forbidden(cls, message: str = "Admin role required") -> "Outcome":
        return cls(Status.FORBIDDEN, message=message)

    @classmethod
    def not_found(cls, message: str = "Not found") -> "Outcome":
        return cls(Status.NOT_FOUND, message=message)

    @classmethod
    def invalid(cls, message: str) -> "Outcome":
        return cls(Status.INVALID, message=message)
