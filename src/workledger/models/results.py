"""Call result models and error codes.

Error codes are small integers with one namespace per contract; they are
part of the observable contract surface and must never be renumbered.
The IntEnum members compare equal to the bare integers callers assert on.
Dispatcher-level failures (unknown contract, unknown function) are
reported as messages, not codes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional, Union

CONTRACT_NOT_FOUND = "Contract not found"
FUNCTION_NOT_IMPLEMENTED = "Function not implemented in mock"


class WorkerVerificationError(enum.IntEnum):
    """Error codes returned by the worker-verification contract."""
    ALREADY_VERIFIED = 1
    WORKER_NOT_FOUND = 2
    NOT_WORKER_OWNER = 3
    DOCUMENT_NOT_FOUND = 4
    NOT_ADMIN = 5


class SkillCertificationError(enum.IntEnum):
    """Error codes returned by the skill-certification contract."""
    NOT_ADMIN = 1
    SKILL_EXISTS = 2
    SKILL_NOT_FOUND = 3
    INVALID_LEVEL = 4
    NOT_ADMIN_FOR_TRANSFER = 5


ErrorValue = Union[int, str]


@dataclass(frozen=True)
class CallResult:
    """Result of a public (state-changing) contract call."""
    success: bool
    error: Optional[ErrorValue] = None

    @classmethod
    def ok(cls) -> CallResult:
        return cls(success=True)

    @classmethod
    def fail(cls, error: ErrorValue) -> CallResult:
        return cls(success=False, error=error)


@dataclass(frozen=True)
class ReadResult:
    """Result of a read-only contract call.

    result is None when the requested record does not exist. success is
    False only when the call could not be dispatched or raised.
    """
    result: Any = None
    success: bool = True
    error: Optional[ErrorValue] = None

    @classmethod
    def fail(cls, error: ErrorValue) -> ReadResult:
        return cls(success=False, error=error)
