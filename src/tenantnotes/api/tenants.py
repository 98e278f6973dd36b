"""Tenant administration API endpoints (admins only)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.permissions import require_tenant_admin
from ..core.schemas.common import ErrorResponse
from ..core.schemas.tenants import InviteRequest, InviteResponse, TenantStatsResponse, UpgradeResponse
from ..core.services import TenantService
from ..database import get_db_session
from ..middleware.auth import TenantContext

router = APIRouter(
    prefix="/tenants",
    tags=["tenants"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
    },
)


@router.post("/{slug}/upgrade", response_model=UpgradeResponse)
async def upgrade_tenant(
    context: TenantContext = Depends(require_tenant_admin("Not authorized to upgrade this tenant")),
    session: AsyncSession = Depends(get_db_session),
):
    """Upgrade the caller's tenant to the pro plan."""
    tenant_service = TenantService(session)
    return await tenant_service.upgrade(context)


@router.get("/{slug}/stats", response_model=TenantStatsResponse)
async def tenant_stats(
    context: TenantContext = Depends(require_tenant_admin("Not authorized to view this tenant's stats")),
    session: AsyncSession = Depends(get_db_session),
):
    """Active user and note counts for the caller's tenant."""
    tenant_service = TenantService(session)
    return await tenant_service.get_stats(context)


@router.post("/{slug}/invite", response_model=InviteResponse)
async def invite_user(
    request: InviteRequest,
    context: TenantContext = Depends(require_tenant_admin("Not authorized to invite users to this tenant")),
    session: AsyncSession = Depends(get_db_session),
):
    """Acknowledge an invitation to the caller's tenant."""
    tenant_service = TenantService(session)
    return await tenant_service.invite_user(context, request)
