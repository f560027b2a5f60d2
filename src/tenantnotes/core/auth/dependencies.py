"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Extracting and verifying the bearer credential
- Exposing the verified identity claim to routes
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tenantnotes.core.auth.backend import verify_credential
from tenantnotes.core.auth.schemas import IdentityClaim


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_identity(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> IdentityClaim:
    """Authentication gate: verify the bearer credential.

    The verified claim is attached to ``request.state`` and bound to the
    structlog context for the rest of the request.

    Args:
        request: The incoming request
        credentials: Bearer token credentials from the request

    Returns:
        The verified identity claim

    Raises:
        AuthenticationError: If the credential is missing, invalid or expired
    """
    identity = verify_credential(credentials.credentials if credentials else None)

    request.state.identity = identity
    request.state.user_id = identity.user_id
    request.state.tenant_id = identity.tenant_id
    structlog.contextvars.bind_contextvars(
        tenant_id=identity.tenant_id,
        user_id=str(identity.user_id),
    )

    return identity


# Type alias for dependency injection
CurrentIdentity = Annotated[IdentityClaim, Depends(get_identity)]
