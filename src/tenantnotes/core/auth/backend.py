"""Authentication backend for JWT and password handling.

This module provides core authentication utilities including:
- Password hashing with bcrypt
- Signed credential (JWT) issuance
- Credential verification into an identity claim
"""

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from tenantnotes.config import settings
from tenantnotes.core.auth.schemas import IdentityClaim
from tenantnotes.core.errors import AuthenticationError
from tenantnotes.core.permissions.roles import Role


if TYPE_CHECKING:
    from tenantnotes.modules.users.models import User


logger = structlog.get_logger()


@lru_cache
def _pwd_context() -> CryptContext:
    """Password hashing context using bcrypt."""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.password_hash_rounds,
    )


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return _pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Malformed hashes count as a mismatch.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return _pwd_context().verify(plain_password, hashed_password)
    except ValueError:
        return False


# ============================================================
# JWT Credential Utilities
# ============================================================


def access_token_lifetime() -> timedelta:
    """Lifetime of an access credential."""
    return timedelta(minutes=settings.access_token_expire_minutes)


def create_access_token(
    user: "User",
    issued_at: datetime | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed access credential carrying the user's identity claim.

    Args:
        user: The authenticated user
        issued_at: Issuance time, defaults to now
        expires_delta: Optional custom lifetime, defaults to the configured one

    Returns:
        Encoded JWT access token
    """
    issued_at = issued_at or datetime.now(UTC)
    expire = issued_at + (expires_delta or access_token_lifetime())

    to_encode: dict[str, Any] = {
        "sub": str(user.id),
        "email": user.email,
        "role": Role(user.role).value,
        "tenant_id": user.tenant_id,
        "iat": int(issued_at.timestamp()),
        "exp": int(expire.timestamp()),
        "type": "access",
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def verify_credential(token: str | None, now: datetime | None = None) -> IdentityClaim:
    """Verify a credential and rebuild the identity claim it carries.

    A credential issued at ``t`` is accepted for ``t <= now < exp`` only.
    Absent, malformed, forged and expired credentials all raise the same
    error.

    Args:
        token: The encoded JWT, if any
        now: Verification time, defaults to now

    Returns:
        The verified identity claim

    Raises:
        AuthenticationError: If the credential cannot be trusted
    """
    if not token:
        raise AuthenticationError()

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            # Expiry is checked below against ``now`` with a strict bound
            options={"verify_exp": False, "verify_iat": False},
        )

        if payload.get("type") != "access":
            raise AuthenticationError()

        issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=UTC)
        expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=UTC)

        claim = IdentityClaim(
            user_id=int(payload["sub"]),
            email=payload["email"],
            role=Role(payload["role"]),
            tenant_id=payload["tenant_id"],
            issued_at=issued_at,
            expires_at=expires_at,
        )
    except (JWTError, KeyError, TypeError, ValueError) as exc:
        logger.debug("credential_rejected", error_type=type(exc).__name__)
        raise AuthenticationError() from None

    if not claim.tenant_id:
        raise AuthenticationError()

    if (now or datetime.now(UTC)) >= claim.expires_at:
        logger.debug("credential_rejected", error_type="expired")
        raise AuthenticationError()

    return claim

