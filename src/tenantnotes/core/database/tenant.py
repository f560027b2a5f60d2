"""Tenant-scoped database session.

This module provides a session wrapper whose queries always carry a
``tenant_id`` predicate. Repositories for tenant-owned data are built on
top of it, so the tenant filter cannot be left out by a caller.
"""

from typing import Any, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


ModelT = TypeVar("ModelT")


class TenantContextRequired(Exception):
    """Raised when tenant context is required but not provided."""

    def __init__(self, message: str = "Tenant context is required for this operation"):
        self.message = message
        super().__init__(self.message)


class TenantSession:
    """Wraps AsyncSession with mandatory tenant filtering.

    Usage:
        tenant_session = TenantSession(session, tenant_id)
        notes = await tenant_session.all(tenant_session.select(Note))
    """

    def __init__(self, session: AsyncSession, tenant_id: str) -> None:
        if not tenant_id:
            raise TenantContextRequired()
        self.session = session
        self.tenant_id = tenant_id

    def select(self, model: type[ModelT]) -> Select[tuple[ModelT]]:
        """Start a SELECT over ``model`` restricted to the current tenant."""
        return select(model).where(model.tenant_id == self.tenant_id)  # type: ignore[attr-defined]

    def count(self, model: type[Any]) -> Select[tuple[int]]:
        """Build a row count over ``model`` restricted to the current tenant."""
        return (
            select(func.count())
            .select_from(model)
            .where(model.tenant_id == self.tenant_id)
        )

    async def one_or_none(self, statement: Select[tuple[ModelT]]) -> ModelT | None:
        """Execute a tenant-scoped statement and return at most one row."""
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def all(self, statement: Select[tuple[ModelT]]) -> list[ModelT]:
        """Execute a tenant-scoped statement and return all rows."""
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def scalar(self, statement: Select[tuple[int]]) -> int:
        """Execute a tenant-scoped aggregate."""
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def get(self, model: type[ModelT], ident: Any) -> ModelT | None:
        """Get an entity by primary key, scoped to tenant.

        Rows owned by another tenant are filtered out by the query itself,
        so they are indistinguishable from missing rows.
        """
        statement = self.select(model).where(model.id == ident)  # type: ignore[attr-defined]
        return await self.one_or_none(statement)

    def add(self, instance: Any) -> None:
        """Add an instance, stamping it with the current tenant."""
        instance.tenant_id = self.tenant_id
        self.session.add(instance)

    async def delete(self, instance: Any) -> None:
        """Delete an instance that belongs to the current tenant."""
        if instance.tenant_id != self.tenant_id:
            raise TenantContextRequired("Instance does not belong to the current tenant")
        await self.session.delete(instance)

    async def flush(self) -> None:
        """Flush pending changes to the database."""
        await self.session.flush()

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        await self.session.rollback()
