"""Tagged handler results.

Handlers compute an ``Ok`` or ``Err`` first and only turn it into protocol
text at the end, so callers inside the process (and tests) can tell success
from failure even though the text rendering cannot.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from linear_mcp.linear.errors import (
    LinearAPIError,
    LinearAuthenticationError,
    LinearConnectionError,
    LinearNotFoundError,
    LinearPermissionError,
    LinearValidationError,
)

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONNECTION = "connection"
    UPSTREAM = "upstream"
    UNEXPECTED = "unexpected"


_KIND_BY_ERROR: list[tuple[type[Exception], ErrorKind]] = [
    (LinearAuthenticationError, ErrorKind.AUTHENTICATION),
    (LinearPermissionError, ErrorKind.PERMISSION),
    (LinearNotFoundError, ErrorKind.NOT_FOUND),
    (LinearValidationError, ErrorKind.VALIDATION),
    (LinearConnectionError, ErrorKind.CONNECTION),
    (LinearAPIError, ErrorKind.UPSTREAM),
]


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "kind": self.kind.value,
                "message": self.message,
                "statusCode": self.status_code,
            }
        }


HandlerResult = Union[Ok[T], Err]


def capture(exc: Exception) -> Err:
    """Classify an exception raised by an upstream call."""
    for error_cls, kind in _KIND_BY_ERROR:
        if isinstance(exc, error_cls):
            return Err(kind, str(exc), getattr(exc, "status_code", None))
    return Err(ErrorKind.UNEXPECTED, str(exc) or type(exc).__name__)
