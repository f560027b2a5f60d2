"""Role and tenant-ownership checks.

These checks run after authentication and take their facts exclusively
from the verified identity claim, never from request bodies.
"""

from typing import TYPE_CHECKING

import structlog

from tenantnotes.core.errors import AuthorizationError
from tenantnotes.core.permissions.roles import Role


if TYPE_CHECKING:
    from tenantnotes.core.auth.schemas import IdentityClaim


logger = structlog.get_logger()


def has_role(identity: "IdentityClaim", role: Role) -> bool:
    """Check whether the caller holds ``role``."""
    return identity.role == role


def require_role(identity: "IdentityClaim", role: Role) -> "IdentityClaim":
    """Ensure the caller holds ``role``.

    Args:
        identity: The verified identity claim
        role: The role required for the operation

    Returns:
        The same identity, for chaining

    Raises:
        AuthorizationError: If the caller holds a different role
    """
    if not has_role(identity, role):
        logger.warning(
            "access_denied",
            reason="role",
            required_role=role.value,
            current_role=identity.role.value,
        )
        raise AuthorizationError(
            f"{role.value.capitalize()} access required",
            error_code=f"{role.value}_required",
        )
    return identity


def require_tenant_access(identity: "IdentityClaim", tenant_id: str) -> str:
    """Ensure a tenant addressed by the caller is the caller's own tenant.

    Args:
        identity: The verified identity claim
        tenant_id: Tenant id taken from the request path

    Returns:
        The tenant id, which equals ``identity.tenant_id``

    Raises:
        AuthorizationError: If the tenant id belongs to another tenant
    """
    if tenant_id != identity.tenant_id:
        logger.warning(
            "access_denied",
            reason="tenant",
            requested_tenant_id=tenant_id,
        )
        raise AuthorizationError(
            "Access denied to this tenant",
            error_code="tenant_access_denied",
        )
    return tenant_id
