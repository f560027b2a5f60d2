"""Unit tests for role and tenant-ownership checks."""

from datetime import UTC, datetime, timedelta

import pytest

from tenantnotes.core.auth.schemas import IdentityClaim
from tenantnotes.core.errors import AuthenticationError, AuthorizationError
from tenantnotes.core.permissions import (
    Role,
    has_role,
    require_role,
    require_tenant_access,
)
from tenantnotes.core.permissions.decorators import require_admin, requires_role


pytestmark = pytest.mark.unit


def _identity(role: Role, tenant_id: str = "acme") -> IdentityClaim:
    now = datetime.now(UTC)
    return IdentityClaim(
        user_id=1,
        email=f"{role.value}@{tenant_id}.test",
        role=role,
        tenant_id=tenant_id,
        issued_at=now,
        expires_at=now + timedelta(hours=24),
    )


class TestRoleChecks:
    """Tests for has_role and require_role."""

    def test_has_role(self):
        assert has_role(_identity(Role.ADMIN), Role.ADMIN)
        assert not has_role(_identity(Role.MEMBER), Role.ADMIN)

    def test_require_role_passes_matching_role(self):
        identity = _identity(Role.ADMIN)

        assert require_role(identity, Role.ADMIN) is identity

    def test_require_role_rejects_member(self):
        with pytest.raises(AuthorizationError) as exc_info:
            require_role(_identity(Role.MEMBER), Role.ADMIN)

        assert exc_info.value.status_code == 403
        assert exc_info.value.error_code == "admin_required"
        assert exc_info.value.message == "Admin access required"


class TestTenantAccess:
    """Tests for require_tenant_access."""

    def test_own_tenant_is_allowed(self):
        assert require_tenant_access(_identity(Role.ADMIN), "acme") == "acme"

    def test_other_tenant_is_forbidden(self):
        with pytest.raises(AuthorizationError) as exc_info:
            require_tenant_access(_identity(Role.ADMIN), "globex")

        assert exc_info.value.error_code == "tenant_access_denied"


class TestRoleDecorator:
    """Tests for the requires_role decorator."""

    async def test_admin_reaches_route(self):
        @require_admin
        async def route(identity: IdentityClaim) -> str:
            return identity.tenant_id

        assert await route(identity=_identity(Role.ADMIN)) == "acme"

    async def test_member_is_stopped_before_route_runs(self):
        calls: list[IdentityClaim] = []

        @requires_role(Role.ADMIN)
        async def route(identity: IdentityClaim) -> None:
            calls.append(identity)

        with pytest.raises(AuthorizationError):
            await route(identity=_identity(Role.MEMBER))

        assert calls == []

    async def test_missing_identity_is_unauthenticated(self):
        @require_admin
        async def route(identity: IdentityClaim | None = None) -> None:
            return None

        with pytest.raises(AuthenticationError):
            await route()

    def test_decorator_preserves_signature_for_dependency_injection(self):
        async def route(tenant_id: str, identity: IdentityClaim) -> None:
            return None

        wrapped = require_admin(route)

        assert wrapped.__wrapped__ is route
        assert wrapped.__name__ == "route"
