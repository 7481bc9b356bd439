"""RuleError and ValidationOutcome: descriptive results for rule checks.

Domain rules report bad input by *returning* one of these types instead of
raising, so callers can branch on the value or match on its message text.
Both render to their message via ``str()``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RuleError(BaseModel):
    """A domain-validation failure.

    Attributes:
        code: Machine-readable kind (e.g. ``"INVALID_PRICE"``).
        message: Human-readable description, always starting with "Invalid".
        field: Name of the offending argument, when there is one.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return self.message


class ValidationOutcome(BaseModel):
    """Result of a composite validation over several fields."""

    model_config = {"frozen": True}

    ok: bool
    message: str
    errors: list[RuleError] = Field(default_factory=list)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_errors(cls, errors: list[RuleError]) -> ValidationOutcome:
        """Build an outcome whose message joins every error message."""
        if not errors:
            return cls(ok=True, message="Validation successful")
        return cls(ok=False, message=", ".join(e.message for e in errors), errors=errors)
