"""Resource pools shared by every spendable resource in the engine.

A pool is a three-field value (current / maximum / temporary). The
operations here are pure and total: they clamp instead of failing, and
callers decide whether an insufficient pool should block an action.

Example:
    >>> pool = create_resource_pool(8)
    >>> spend(pool, 3).current
    5
    >>> restore(spend(pool, 3), 10).current
    8
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hollow_gear.models.enums import ErrorCode
from hollow_gear.models.results import ValidationIssue, ValidationResult


class ResourcePool(BaseModel):
    """A current/maximum/temporary resource container.

    ``temporary`` adjusts the effective cap and may be negative. Bounds are
    enforced by ``validate_resource_pool`` rather than by the model so that
    a bad persisted record is reported instead of rejected outright.

    Attributes:
        current: Amount available to spend.
        maximum: Base capacity.
        temporary: Delta applied to the capacity.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    current: int = Field(description="Amount available to spend")
    maximum: int = Field(description="Base capacity")
    temporary: int = Field(default=0, description="Delta applied to the capacity")

    @property
    def effective_maximum(self) -> int:
        """Capacity including the temporary delta."""
        return self.maximum + self.temporary


def create_resource_pool(
    maximum: int,
    current: int | None = None,
    temporary: int = 0,
) -> ResourcePool:
    """Create a pool, full unless ``current`` is given."""
    return ResourcePool(
        current=maximum if current is None else current,
        maximum=maximum,
        temporary=temporary,
    )


def effective_maximum(pool: ResourcePool) -> int:
    """Return the pool's capacity including the temporary delta."""
    return pool.effective_maximum


def spend(pool: ResourcePool, amount: int) -> ResourcePool:
    """Remove ``amount`` from the pool, never going below zero."""
    return pool.model_copy(update={"current": max(0, pool.current - amount)})


def restore(pool: ResourcePool, amount: int) -> ResourcePool:
    """Add ``amount`` to the pool, capped at the effective maximum."""
    new_current = min(pool.effective_maximum, pool.current + amount)
    return pool.model_copy(update={"current": max(0, new_current)})


def set_current(pool: ResourcePool, amount: int) -> ResourcePool:
    """Set the current value, clamped to ``[0, effective maximum]``."""
    new_current = max(0, min(pool.effective_maximum, amount))
    return pool.model_copy(update={"current": new_current})


def has_at_least(pool: ResourcePool, cost: int) -> bool:
    """Check whether the pool can pay ``cost``."""
    return pool.current >= cost


def percent_remaining(pool: ResourcePool) -> float:
    """Fraction of the effective maximum still available, in ``[0, 1]``."""
    cap = pool.effective_maximum
    if cap <= 0:
        return 0.0
    return max(0.0, min(1.0, pool.current / cap))


def validate_resource_pool(pool: ResourcePool, context: str) -> ValidationResult[ResourcePool]:
    """Check the pool invariants.

    Args:
        pool: The pool to check.
        context: Field path prefix used in issue reports (e.g. ``"aether_flux"``).

    Returns:
        A result listing every violated invariant.
    """
    issues: list[ValidationIssue] = []

    if pool.current < 0:
        issues.append(
            ValidationIssue(
                field=f"{context}.current",
                message="Current resources must be a non-negative integer",
                code=ErrorCode.INVALID_CURRENT,
            )
        )

    if pool.maximum < 0:
        issues.append(
            ValidationIssue(
                field=f"{context}.maximum",
                message="Maximum resources must be a non-negative integer",
                code=ErrorCode.INVALID_MAXIMUM,
            )
        )

    if pool.current > pool.effective_maximum:
        issues.append(
            ValidationIssue(
                field=f"{context}.current",
                message="Current resources cannot exceed effective maximum",
                code=ErrorCode.CURRENT_EXCEEDS_MAXIMUM,
                context={
                    "current": pool.current,
                    "effective_maximum": pool.effective_maximum,
                },
            )
        )

    return ValidationResult.from_issues(pool, issues)


__all__ = [
    "ResourcePool",
    "create_resource_pool",
    "effective_maximum",
    "spend",
    "restore",
    "set_current",
    "has_at_least",
    "percent_remaining",
    "validate_resource_pool",
]
