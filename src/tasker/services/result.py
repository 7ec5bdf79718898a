"""ServiceResult and ServiceError, the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult.
The command layer renders it and derives the exit code from ``ok``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Error codes a task operation can fail with."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    STORE_ERROR = "STORE_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_task"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
        )
