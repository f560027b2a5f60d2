"""Authentication API routes.

Provides endpoints for:
- Login with email and password
- Current user lookup
"""

from fastapi import APIRouter

from tenantnotes.core.auth.dependencies import CurrentIdentity
from tenantnotes.core.auth.service import AuthSvc
from tenantnotes.modules.tenants.schemas import TenantResponse
from tenantnotes.modules.users.schemas import (
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    UserSummary,
)


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with email and password",
    description="Authenticate with email and password to receive a 24-hour bearer credential.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
) -> LoginResponse:
    """Login with email and password."""
    user, credential = await service.login(email=data.email, password=data.password)

    return LoginResponse(
        access_token=credential.access_token,
        token_type=credential.token_type,
        expires_in=credential.expires_in,
        user=UserSummary.model_validate(user),
    )


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="Get current user",
    description="Returns the authenticated user's identity and tenant record.",
)
async def get_me(
    identity: CurrentIdentity,
    service: AuthSvc,
) -> CurrentUserResponse:
    """Get current user profile."""
    user = await service.get_current_user(identity)

    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        role=user.role,
        tenant_id=user.tenant_id,
        tenant=TenantResponse.from_tenant(user.tenant) if user.tenant else None,
    )
