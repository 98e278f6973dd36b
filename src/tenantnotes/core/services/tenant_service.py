"""Tenant administration: plan upgrade, usage stats and invitations."""

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import AlreadyUpgradedError, UserExistsError, ValidationFailedError
from ..logging import get_logger
from ..models.tenant import TenantPlan
from ..repositories.note_repository import NoteRepository
from ..repositories.tenant_repository import TenantRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import TenantSummary
from ..schemas.tenants import (
    InviteRequest,
    InviteResponse,
    TenantStats,
    TenantStatsResponse,
    UpgradeResponse,
)
from .quota_service import QuotaService

logger = get_logger("tenant_service")


class TenantService:
    """Operations an admin runs on their own tenant.

    The route dependency has already matched the path slug to the caller's
    tenant, so every method works on context.tenant.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tenant_repo = TenantRepository(session)
        self.user_repo = UserRepository(session)
        self.note_repo = NoteRepository(session)

    async def upgrade(self, context) -> UpgradeResponse:
        """Move a free tenant to the pro plan."""
        tenant = context.tenant
        if tenant.plan == TenantPlan.PRO:
            raise AlreadyUpgradedError()

        tenant = await self.tenant_repo.update_plan(tenant, TenantPlan.PRO)
        logger.info("Tenant upgraded", extra={"tenant": tenant.slug, "plan": tenant.plan.value})

        return UpgradeResponse(
            message="Successfully upgraded to Pro plan",
            tenant=TenantSummary.model_validate(tenant),
        )

    async def get_stats(self, context) -> TenantStatsResponse:
        """Active user and note counts plus remaining quota."""
        tenant = context.tenant
        user_count = await self.user_repo.count_active_users(tenant.id)
        note_count = await self.note_repo.count_active_notes(tenant.id)

        return TenantStatsResponse(
            tenant=TenantSummary.model_validate(tenant),
            stats=TenantStats(
                users=user_count,
                notes=note_count,
                notes_remaining=QuotaService.notes_remaining(tenant, note_count),
            ),
        )

    async def invite_user(self, context, request: InviteRequest) -> InviteResponse:
        """Acknowledge an invitation. No account is created and no email is sent."""
        if not request.email:
            raise ValidationFailedError("Email is required")

        # emails identify accounts across every tenant (login takes no tenant)
        if await self.user_repo.is_email_taken(request.email):
            raise UserExistsError()

        logger.info(
            "Invitation acknowledged",
            extra={"tenant": context.tenant.slug, "role": request.role.value},
        )
        return InviteResponse(
            message="Invitation sent successfully",
            email=request.email,
            role=request.role,
            tenant=context.tenant.slug,
            note="In a real application, an invitation email would be sent to the user",
        )
