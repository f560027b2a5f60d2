"""Tenant database models."""

from enum import StrEnum

from sqlalchemy import CheckConstraint, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from tenantnotes.core.constants import (
    MAX_NAME_LENGTH,
    MAX_PLAN_LENGTH,
    MAX_TENANT_ID_LENGTH,
)
from tenantnotes.core.database.base import Base, TimestampMixin
from tenantnotes.modules.tenants.quota import NoteLimit, note_limit_from_column


class TenantPlan(StrEnum):
    """Subscription tier of a tenant. Transitions only go free -> pro."""

    FREE = "free"
    PRO = "pro"


class Tenant(Base, TimestampMixin):
    """Tenant model representing an organization.

    All tenant-scoped data references this table via tenant_id.

    Attributes:
        id: Stable string key (e.g. "acme")
        name: Display name
        plan: Current subscription plan
        note_limit_value: Raw limit column, NULL for unbounded plans
    """

    __tablename__ = "tenants"
    __table_args__ = (
        CheckConstraint(
            "(plan = 'pro' AND note_limit IS NULL) "
            "OR (plan = 'free' AND note_limit IS NOT NULL AND note_limit > 0)",
            name="ck_tenants_plan_note_limit",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(MAX_TENANT_ID_LENGTH),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    plan: Mapped[TenantPlan] = mapped_column(
        Enum(
            TenantPlan,
            native_enum=False,
            length=MAX_PLAN_LENGTH,
            values_callable=lambda plans: [plan.value for plan in plans],
        ),
        default=TenantPlan.FREE,
        nullable=False,
    )
    note_limit_value: Mapped[int | None] = mapped_column(
        "note_limit",
        Integer,
        nullable=True,
    )

    @property
    def note_limit(self) -> NoteLimit:
        """The tenant's note allowance as a tagged value."""
        return note_limit_from_column(self.note_limit_value)

    @property
    def is_pro(self) -> bool:
        return self.plan == TenantPlan.PRO

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, name={self.name}, plan={self.plan})>"
