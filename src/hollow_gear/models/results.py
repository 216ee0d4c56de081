"""Result records returned by validation functions.

Validation never raises for rule violations. It returns a
``ValidationResult`` whose ``errors`` lists every problem found, each with
a stable ``ErrorCode`` the caller can branch on.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from hollow_gear.models.enums import ErrorCode


T = TypeVar("T")


class ValidationIssue(BaseModel):
    """A single coded problem.

    Attributes:
        field: Dotted path of the offending field.
        message: Human-readable description, shown verbatim to users.
        code: Stable machine-readable code.
        context: Optional numbers that explain the failure.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str
    message: str
    code: ErrorCode
    context: dict[str, Any] | None = None


class ValidationResult(BaseModel, Generic[T]):
    """Outcome of validating a record.

    Attributes:
        success: True when no issues were found.
        data: The validated record, only on success.
        errors: Every issue found, empty on success.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool
    data: T | None = None
    errors: tuple[ValidationIssue, ...] = Field(default_factory=tuple)

    @classmethod
    def from_issues(cls, data: T, issues: list[ValidationIssue]) -> "ValidationResult[T]":
        """Build a result from an accumulated issue list."""
        if issues:
            return cls(success=False, errors=tuple(issues))
        return cls(success=True, data=data)

    @property
    def codes(self) -> list[ErrorCode]:
        """Codes of every issue, in the order they were found."""
        return [issue.code for issue in self.errors]


__all__ = [
    "ValidationIssue",
    "ValidationResult",
]
