"""Database layer - session management, base models, and mixins."""

from tenantnotes.core.database.base import Base, TenantMixin, TimestampMixin, utcnow
from tenantnotes.core.database.locks import TenantLocks, tenant_locks
from tenantnotes.core.database.session import (
    async_engine,
    async_session_factory,
    create_tables,
    get_db,
)
from tenantnotes.core.database.tenant import TenantContextRequired, TenantSession


__all__ = [
    "Base",
    "TenantContextRequired",
    "TenantLocks",
    "TenantMixin",
    "TenantSession",
    "TimestampMixin",
    "async_engine",
    "async_session_factory",
    "create_tables",
    "get_db",
    "tenant_locks",
    "utcnow",
]
