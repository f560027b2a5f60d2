"""Tenant service: lookup and the one-way plan upgrade."""

from typing import Annotated

import structlog
from fastapi import Depends

from tenantnotes.api.dependencies import DBSession
from tenantnotes.config import settings
from tenantnotes.core.errors import ConflictError, NotFoundError
from tenantnotes.modules.tenants.models import Tenant, TenantPlan
from tenantnotes.modules.tenants.quota import note_limit_to_column, quota_for_plan
from tenantnotes.modules.tenants.repos import TenantRepository


logger = structlog.get_logger()


class TenantService:
    """Service for tenant registry operations.

    Ownership checks happen before these methods are called; the service
    itself trusts the tenant id it is given.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.repo = TenantRepository(db)

    async def get(self, tenant_id: str) -> Tenant:
        """Get a tenant by id.

        Raises:
            NotFoundError: If the tenant does not exist
        """
        tenant = await self.repo.get(tenant_id)
        if not tenant:
            raise NotFoundError("Tenant not found", resource="tenant")
        return tenant

    async def create(
        self,
        tenant_id: str,
        name: str,
        plan: TenantPlan = TenantPlan.FREE,
    ) -> Tenant:
        """Create a tenant with the note limit its plan carries."""
        limit = quota_for_plan(plan, settings.free_plan_note_limit)
        tenant = Tenant(
            id=tenant_id,
            name=name,
            plan=plan,
            note_limit_value=note_limit_to_column(limit),
        )
        return await self.repo.create(tenant)

    async def upgrade(self, tenant_id: str) -> Tenant:
        """Upgrade a tenant from free to pro.

        Repeated upgrades are refused rather than silently accepted.

        Raises:
            NotFoundError: If the tenant does not exist
            ConflictError: If the tenant is already on the pro plan
        """
        upgraded = await self.repo.mark_pro(tenant_id)
        tenant = await self.get(tenant_id)

        if not upgraded:
            logger.info("tenant_upgrade_refused", tenant_id=tenant_id, plan=tenant.plan)
            raise ConflictError(
                "Tenant is already on Pro plan",
                error_code="already_pro",
            )

        logger.info("tenant_upgraded", tenant_id=tenant_id, plan=tenant.plan)
        return tenant


# Type alias for dependency injection
TenantSvc = Annotated[TenantService, Depends(TenantService)]
