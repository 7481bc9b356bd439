"""ServiceResult and ServiceError: the envelope for service operations.

INVARIANT: All RuleService methods return ServiceResult.
The CLI consumes this type; domain functions never see it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from shopkit.domain.outcome import RuleError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_rule_error(cls, error: RuleError) -> ServiceError:
        detail = {"field": error.field} if error.field else {}
        return cls(code=error.code, message=error.message, detail=detail)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"calculate_discount"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, error: RuleError | ServiceError) -> ServiceResult:
        if isinstance(error, RuleError):
            error = ServiceError.from_rule_error(error)
        return cls(ok=False, op=op, error=error)
