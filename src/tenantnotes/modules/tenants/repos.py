"""Tenant repository for database operations."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tenantnotes.core.database.base import utcnow
from tenantnotes.modules.tenants.models import Tenant, TenantPlan


class TenantRepository:
    """Repository for Tenant database operations.

    Tenants are the unit of isolation, so lookups here are by tenant id
    only. Callers are responsible for checking that the id is the
    caller's own tenant.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant.

        Args:
            tenant: Tenant instance to create

        Returns:
            The created tenant
        """
        self.session.add(tenant)
        await self.session.flush()
        return tenant

    async def get(self, tenant_id: str) -> Tenant | None:
        """Get a tenant by id.

        Args:
            tenant_id: The tenant's id

        Returns:
            Tenant if found, None otherwise
        """
        stmt = (
            select(Tenant)
            .where(Tenant.id == tenant_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_update(self, tenant_id: str) -> Tenant | None:
        """Get a tenant by id and lock its row until the transaction ends.

        The row lock serializes quota decisions for the tenant across
        database connections (``FOR UPDATE`` is a no-op on SQLite).

        Args:
            tenant_id: The tenant's id

        Returns:
            Tenant if found, None otherwise
        """
        stmt = (
            select(Tenant)
            .where(Tenant.id == tenant_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_pro(self, tenant_id: str) -> bool:
        """Move a free tenant to the pro plan in a single statement.

        The ``plan = 'free'`` predicate makes the transition one-way and
        lets at most one concurrent caller win.

        Args:
            tenant_id: The tenant's id

        Returns:
            True if the row was upgraded, False if it is missing or already pro
        """
        stmt = (
            update(Tenant)
            .where(Tenant.id == tenant_id, Tenant.plan == TenantPlan.FREE)
            .values(
                {
                    Tenant.plan: TenantPlan.PRO,
                    Tenant.note_limit_value: None,
                    Tenant.updated_at: utcnow(),
                }
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
