"""Pydantic schemas for tenant operations."""

from pydantic import BaseModel, ConfigDict, Field

from tenantnotes.modules.tenants.models import Tenant, TenantPlan
from tenantnotes.modules.tenants.quota import note_limit_to_column


class TenantResponse(BaseModel):
    """Schema for tenant response data.

    ``note_limit`` is null when the plan carries no limit.
    """

    id: str
    name: str
    plan: TenantPlan
    note_limit: int | None = Field(
        ..., description="Maximum number of notes, null when unbounded"
    )

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_tenant(cls, tenant: Tenant) -> "TenantResponse":
        """Build the response from a Tenant row."""
        return cls(
            id=tenant.id,
            name=tenant.name,
            plan=tenant.plan,
            note_limit=note_limit_to_column(tenant.note_limit),
        )


class TenantUpgradeResponse(BaseModel):
    """Schema returned after a successful plan upgrade."""

    message: str
    tenant: TenantResponse
