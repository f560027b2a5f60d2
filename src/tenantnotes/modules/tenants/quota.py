"""Note quota policy.

A tenant's note allowance is an explicit tagged value: ``Bounded(n)`` for
free plans and ``Unbounded()`` for pro plans. The policy never counts notes
itself; callers pass a count taken immediately before the decision.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from tenantnotes.modules.tenants.models import Tenant, TenantPlan


@dataclass(frozen=True)
class Bounded:
    """A finite note allowance."""

    limit: int

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("A bounded note limit must be a positive integer")

    def allows(self, current_count: int) -> bool:
        return current_count < self.limit


@dataclass(frozen=True)
class Unbounded:
    """No note allowance at all."""

    def allows(self, current_count: int) -> bool:  # noqa: ARG002
        return True


NoteLimit = Bounded | Unbounded


def note_limit_from_column(value: int | None) -> NoteLimit:
    """Decode the nullable ``note_limit`` column (NULL means unbounded)."""
    if value is None:
        return Unbounded()
    return Bounded(value)


def note_limit_to_column(limit: NoteLimit) -> int | None:
    """Encode a note limit for the nullable ``note_limit`` column."""
    if isinstance(limit, Bounded):
        return limit.limit
    return None


def quota_for_plan(plan: "TenantPlan", free_limit: int) -> NoteLimit:
    """Return the note limit a plan carries.

    Args:
        plan: The tenant's plan
        free_limit: Allowance configured for free plans

    Returns:
        ``Bounded(free_limit)`` for free plans, ``Unbounded()`` for pro
    """
    from tenantnotes.modules.tenants.models import TenantPlan  # noqa: PLC0415

    if plan == TenantPlan.PRO:
        return Unbounded()
    return Bounded(free_limit)


def may_create(tenant: "Tenant", current_count: int) -> bool:
    """Decide whether ``tenant`` may hold one more note.

    Args:
        tenant: The tenant creating the note
        current_count: Number of notes the tenant holds right now

    Returns:
        True for pro tenants; for free tenants, True iff the count is
        still below the limit
    """
    return tenant.note_limit.allows(current_count)
