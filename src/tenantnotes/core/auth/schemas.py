"""Authentication schemas for credential handling."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from tenantnotes.core.permissions.roles import Role


class IdentityClaim(BaseModel):
    """Verified facts about the caller, rebuilt from a credential.

    Instances are only produced by the credential verifier and are
    never persisted.

    Attributes:
        user_id: The user's id
        email: The user's email at login time
        role: The user's role in the tenant
        tenant_id: The tenant every request is scoped to
        issued_at: When the credential was issued
        expires_at: When the credential stops being accepted
    """

    user_id: int
    email: str
    role: Role
    tenant_id: str
    issued_at: datetime
    expires_at: datetime

    model_config = ConfigDict(frozen=True)


class Credential(BaseModel):
    """A signed bearer credential.

    Attributes:
        access_token: The signed JWT
        token_type: Always "bearer"
        expires_in: Lifetime in seconds
    """

    access_token: str
    token_type: str = "bearer"
    expires_in: int
