"""ServiceResult — what every flatkit service operation hands back to the CLI.

Input problems never escape as exceptions; they come back as a failed
result carrying one of the :class:`ErrorCode` values.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable reasons an operation can fail."""

    INVALID_JSON = "INVALID_JSON"
    INPUT_TOO_DEEP = "INPUT_TOO_DEEP"


class ServiceError(BaseModel):
    """Why an operation failed, plus any position info from the decoder."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a flatten or inspect call.

    Attributes:
        ok: False only when the input could not be decoded.
        op: ``"flatten"`` or ``"inspect"``.
        data: The operation payload; empty on failure.
        warnings: Non-fatal notes, e.g. input that is not array-like.
        error: Set exactly when ``ok`` is False.
        meta: Timing, shown in verbose output.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result for *op*."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
