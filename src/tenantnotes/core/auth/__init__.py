"""Authentication module for credentials and password handling."""

from tenantnotes.core.auth.backend import (
    create_access_token,
    hash_password,
    verify_credential,
    verify_password,
)
from tenantnotes.core.auth.dependencies import (
    CurrentIdentity,
    get_identity,
)
from tenantnotes.core.auth.middleware import RequestIdMiddleware
from tenantnotes.core.auth.schemas import Credential, IdentityClaim


__all__ = [
    # Schemas
    "Credential",
    # Dependencies
    "CurrentIdentity",
    "IdentityClaim",
    # Middleware
    "RequestIdMiddleware",
    # Token utilities
    "create_access_token",
    "get_identity",
    # Password utilities
    "hash_password",
    "verify_credential",
    "verify_password",
]
