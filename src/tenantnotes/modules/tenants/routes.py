"""Tenant API routes."""

from fastapi import APIRouter

from tenantnotes.core.auth.dependencies import CurrentIdentity
from tenantnotes.core.permissions import require_tenant_access
from tenantnotes.core.permissions.decorators import require_admin
from tenantnotes.modules.tenants.schemas import TenantResponse, TenantUpgradeResponse
from tenantnotes.modules.tenants.services import TenantSvc


router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post(
    "/{tenant_id}/upgrade",
    response_model=TenantUpgradeResponse,
    summary="Upgrade tenant to Pro",
    description="Moves the caller's own tenant from the free plan to the pro plan. Admins only.",
)
@require_admin
async def upgrade_tenant(
    tenant_id: str,
    identity: CurrentIdentity,
    service: TenantSvc,
) -> TenantUpgradeResponse:
    """Upgrade the caller's tenant."""
    require_tenant_access(identity, tenant_id)

    tenant = await service.upgrade(tenant_id)

    return TenantUpgradeResponse(
        message="Tenant upgraded to Pro plan successfully",
        tenant=TenantResponse.from_tenant(tenant),
    )


@router.get(
    "/{tenant_id}",
    response_model=TenantResponse,
    summary="Get tenant",
    description="Returns the caller's own tenant record.",
)
async def get_tenant(
    tenant_id: str,
    identity: CurrentIdentity,
    service: TenantSvc,
) -> TenantResponse:
    """Get the caller's tenant."""
    require_tenant_access(identity, tenant_id)

    tenant = await service.get(tenant_id)
    return TenantResponse.from_tenant(tenant)
