"""Authentication service for login and identity lookup."""

import secrets
from functools import lru_cache
from typing import Annotated

import structlog
from fastapi import Depends

from tenantnotes.api.dependencies import DBSession
from tenantnotes.core.auth.backend import (
    access_token_lifetime,
    create_access_token,
    hash_password,
    verify_password,
)
from tenantnotes.core.auth.schemas import Credential, IdentityClaim
from tenantnotes.core.errors import AuthenticationError, NotFoundError
from tenantnotes.modules.users.models import User
from tenantnotes.modules.users.repos import UserRepository


logger = structlog.get_logger()


@lru_cache
def _dummy_password_hash() -> str:
    return hash_password(secrets.token_urlsafe(16))


class AuthService:
    """Service for authentication operations.

    Handles credential issuance and resolving the current user.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.user_repo = UserRepository(db)

    async def login(self, email: str, password: str) -> tuple[User, Credential]:
        """Authenticate a user with email and password.

        Unknown emails and wrong passwords produce the same error so the
        endpoint cannot be used to enumerate accounts.

        Args:
            email: User's email address, matched exactly
            password: Plain text password

        Returns:
            Tuple of (user, credential)

        Raises:
            AuthenticationError: If credentials are invalid
        """
        # System-level lookup: tenant is not known during login
        user = await self.user_repo.get_by_email_system(email)

        # Unknown emails still pay for a hash check to keep timing uniform
        password_hash = user.password_hash if user else _dummy_password_hash()
        password_ok = verify_password(password, password_hash)

        if not user or not password_ok:
            logger.info("login_failed")
            raise AuthenticationError(
                "Invalid credentials",
                error_code="invalid_credentials",
            )

        credential = Credential(
            access_token=create_access_token(user),
            expires_in=int(access_token_lifetime().total_seconds()),
        )

        logger.info("login_succeeded", user_id=str(user.id), tenant_id=user.tenant_id)
        return user, credential

    async def get_current_user(self, identity: IdentityClaim) -> User:
        """Get the user behind a verified claim, within the claim's tenant.

        Args:
            identity: The verified identity claim

        Returns:
            The user

        Raises:
            NotFoundError: If the user no longer exists in that tenant
        """
        user = await self.user_repo.get_by_id(identity.user_id, identity.tenant_id)
        if not user:
            raise NotFoundError("User not found", resource="user")
        return user


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
