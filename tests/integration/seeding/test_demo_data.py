"""Integration tests for demo data seeding."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tenantnotes.core.auth.backend import verify_password
from tenantnotes.core.permissions.roles import Role
from tenantnotes.modules.tenants.models import Tenant, TenantPlan
from tenantnotes.modules.users.models import User
from tenantnotes.seed import DEMO_PASSWORD, seed_demo_data


pytestmark = pytest.mark.integration


async def test_seed_creates_tenants_and_users(db: AsyncSession):
    created = await seed_demo_data(db)

    assert created == {"tenants": 2, "users": 4}

    tenants = (await db.execute(select(Tenant).order_by(Tenant.id))).scalars().all()
    assert [(t.id, t.plan, t.note_limit_value) for t in tenants] == [
        ("acme", TenantPlan.FREE, 3),
        ("globex", TenantPlan.FREE, 3),
    ]

    users = {
        user.email: user
        for user in (await db.execute(select(User))).scalars().all()
    }
    assert users["admin@acme.test"].role == Role.ADMIN
    assert users["user@acme.test"].role == Role.MEMBER
    assert users["admin@globex.test"].tenant_id == "globex"
    assert users["user@globex.test"].role == Role.MEMBER
    assert verify_password(DEMO_PASSWORD, users["user@globex.test"].password_hash)


async def test_seed_is_idempotent(db: AsyncSession):
    await seed_demo_data(db)

    created = await seed_demo_data(db)

    assert created == {"tenants": 0, "users": 0}
    user_count = (await db.execute(select(func.count()).select_from(User))).scalar_one()
    assert user_count == 4
