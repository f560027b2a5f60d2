"""Role decorators for route protection.

This module provides decorators that can be applied to FastAPI
routes to require a role. The decorated route must accept the
verified claim as an ``identity`` keyword argument.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from tenantnotes.core.auth.schemas import IdentityClaim
from tenantnotes.core.errors import AuthenticationError
from tenantnotes.core.permissions.checker import require_role
from tenantnotes.core.permissions.roles import Role


P = ParamSpec("P")
R = TypeVar("R")


def requires_role(
    role: Role,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires the caller to hold ``role``.

    Usage:
        @router.post("/tenants/{tenant_id}/upgrade")
        @requires_role(Role.ADMIN)
        async def upgrade(tenant_id: str, identity: CurrentIdentity):
            ...

    Args:
        role: The role required to run the route

    Returns:
        Decorator function

    Raises:
        AuthorizationError: If the caller holds a different role
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            identity = kwargs.get("identity")
            if not isinstance(identity, IdentityClaim):
                raise AuthenticationError()

            require_role(identity, role)

            return await func(*args, **kwargs)

        return wrapper

    return decorator


require_admin = requires_role(Role.ADMIN)
