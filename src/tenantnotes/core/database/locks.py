"""Per-tenant locks for check-then-act sequences.

Each tenant gets its own ``asyncio.Lock`` so that work for one tenant
never waits on another. The lock only serializes coroutines inside this
process; the tenant row lock taken by the repositories covers multiple
workers on PostgreSQL.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class TenantLocks:
    """Registry of asyncio locks keyed by tenant id."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    def get(self, tenant_id: str) -> asyncio.Lock:
        """Return the lock for a tenant, creating it on first use."""
        if tenant_id not in self._locks:
            self._locks[tenant_id] = asyncio.Lock()
        return self._locks[tenant_id]

    @asynccontextmanager
    async def hold(self, tenant_id: str) -> AsyncIterator[None]:
        """Hold the tenant's lock for the duration of the block."""
        async with self.get(tenant_id):
            yield


# Process-wide registry shared by all requests
tenant_locks = TenantLocks()
