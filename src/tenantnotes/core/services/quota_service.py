"""Plan quota checks."""

from typing import Literal, Union

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import QuotaExceededError
from ..logging import get_logger
from ..models.tenant import Tenant, TenantPlan
from ..repositories.note_repository import NoteRepository

logger = get_logger("quota")

UNLIMITED = "unlimited"


class QuotaService:
    """Compares a tenant's note usage with its plan limit.

    The count and the following insert are separate statements, so two
    concurrent creations can both pass the check and overshoot the limit.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def ensure_can_create_note(self, tenant: Tenant) -> None:
        """Raise QuotaExceededError if the tenant has no notes left."""
        if tenant.plan != TenantPlan.FREE or tenant.max_notes <= 0:
            return

        note_count = await self.note_repo.count_active_notes(tenant.id)
        if note_count >= tenant.max_notes:
            logger.info(
                "Note quota reached",
                extra={"tenant": tenant.slug, "limit": tenant.max_notes, "current": note_count},
            )
            raise QuotaExceededError(limit=tenant.max_notes, current=note_count)

    @staticmethod
    def notes_remaining(tenant: Tenant, note_count: int) -> Union[int, Literal["unlimited"]]:
        if tenant.is_unlimited:
            return UNLIMITED
        return max(0, tenant.max_notes - note_count)
