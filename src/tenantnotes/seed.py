"""Demo data for development.

Creates the ``acme`` and ``globex`` tenants on the free plan with one
admin and one member each. Running it again leaves existing rows alone.
"""

from dataclasses import dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from tenantnotes.core.auth.backend import hash_password
from tenantnotes.core.permissions.roles import Role
from tenantnotes.modules.tenants.repos import TenantRepository
from tenantnotes.modules.tenants.services import TenantService
from tenantnotes.modules.users.models import User
from tenantnotes.modules.users.repos import UserRepository


logger = structlog.get_logger()

DEMO_PASSWORD = "password"


@dataclass(frozen=True)
class DemoUser:
    email: str
    role: Role
    tenant_id: str


DEMO_TENANTS: dict[str, str] = {
    "acme": "Acme Corporation",
    "globex": "Globex Corporation",
}

DEMO_USERS: tuple[DemoUser, ...] = (
    DemoUser("admin@acme.test", Role.ADMIN, "acme"),
    DemoUser("user@acme.test", Role.MEMBER, "acme"),
    DemoUser("admin@globex.test", Role.ADMIN, "globex"),
    DemoUser("user@globex.test", Role.MEMBER, "globex"),
)


async def seed_demo_data(session: AsyncSession) -> dict[str, int]:
    """Insert the demo tenants and users that are missing.

    Args:
        session: Database session; committed on success

    Returns:
        Number of tenants and users created
    """
    tenant_repo = TenantRepository(session)
    tenant_service = TenantService(session)
    user_repo = UserRepository(session)
    created = {"tenants": 0, "users": 0}

    for tenant_id, name in DEMO_TENANTS.items():
        if await tenant_repo.get(tenant_id):
            continue
        await tenant_service.create(tenant_id, name)
        created["tenants"] += 1

    password_hash: str | None = None
    for demo in DEMO_USERS:
        if await user_repo.get_by_email_system(demo.email):
            continue
        if password_hash is None:
            password_hash = hash_password(DEMO_PASSWORD)
        await user_repo.create(
            User(
                email=demo.email,
                password_hash=password_hash,
                role=demo.role,
                tenant_id=demo.tenant_id,
            )
        )
        created["users"] += 1

    await session.commit()
    logger.info("demo_data_seeded", **created)
    return created
