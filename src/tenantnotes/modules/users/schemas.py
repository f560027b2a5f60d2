"""Pydantic schemas for user and login operations."""

from pydantic import BaseModel, ConfigDict, Field

from tenantnotes.core.constants import MAX_EMAIL_LENGTH
from tenantnotes.core.permissions.roles import Role
from tenantnotes.modules.tenants.schemas import TenantResponse


# ============================================================
# User Schemas
# ============================================================


class UserSummary(BaseModel):
    """Identity summary of a user."""

    id: int
    email: str
    role: Role
    tenant_id: str

    model_config = ConfigDict(from_attributes=True)


class CurrentUserResponse(UserSummary):
    """Schema for the current user together with their tenant."""

    tenant: TenantResponse | None


# ============================================================
# Authentication Schemas
# ============================================================


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: str = Field(..., min_length=1, max_length=MAX_EMAIL_LENGTH)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Schema for a successful login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserSummary
