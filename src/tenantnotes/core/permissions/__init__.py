"""Access guard: role and tenant-ownership checks."""

from tenantnotes.core.permissions.checker import (
    has_role,
    require_role,
    require_tenant_access,
)
from tenantnotes.core.permissions.roles import Role


__all__ = [
    "Role",
    "has_role",
    "require_role",
    "require_tenant_access",
]
