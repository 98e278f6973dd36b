"""Note service implementation.

All lookups go through the caller's TenantContext, so a note of another
tenant is indistinguishable from a missing one.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ForbiddenError, NotFoundError
from ..logging import get_logger
from ..models.note import Note
from ..permissions import can_modify_note
from ..repositories.note_repository import NoteRepository
from ..schemas.common import PaginationInfo
from ..schemas.notes import NoteEnvelope, NoteListResponse, NoteResponse, NoteWrite
from .quota_service import QuotaService

logger = get_logger("note_service")


def _parse_note_id(note_id: str) -> Optional[UUID]:
    try:
        return UUID(str(note_id))
    except ValueError:
        return None


class NoteService:
    """CRUD over the notes of one tenant."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.quota = QuotaService(session)

    async def list_notes(
        self,
        context,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
    ) -> NoteListResponse:
        """List active tenant notes, newest first."""
        search = search.strip() if search else None
        notes, total = await self.note_repo.list_tenant_notes(
            context.tenant_id, page=page, per_page=limit, search=search or None
        )
        return NoteListResponse(
            notes=[NoteResponse.model_validate(note) for note in notes],
            pagination=PaginationInfo.create(page=page, limit=limit, total=total),
        )

    async def get_note(self, context, note_id: str) -> NoteEnvelope:
        note = await self._get_active_note(context, note_id)
        return NoteEnvelope(note=NoteResponse.model_validate(note))

    async def create_note(self, context, request: NoteWrite) -> NoteEnvelope:
        """Create a note after checking the tenant's quota."""
        await self.quota.ensure_can_create_note(context.tenant)

        note = await self.note_repo.create_note(
            {
                "title": request.title,
                "content": request.content,
                "user": context.user,
                "tenant_id": context.tenant_id,
            }
        )
        logger.info(
            "Note created",
            extra={"note_id": str(note.id), "tenant": context.tenant.slug, "user_id": str(context.user_id)},
        )
        return NoteEnvelope(note=NoteResponse.model_validate(note))

    async def update_note(self, context, note_id: str, request: NoteWrite) -> NoteEnvelope:
        note = await self._get_modifiable_note(context, note_id, action="update")
        note = await self.note_repo.update_note(
            note, {"title": request.title, "content": request.content}
        )
        return NoteEnvelope(note=NoteResponse.model_validate(note))

    async def delete_note(self, context, note_id: str) -> None:
        """Soft delete."""
        note = await self._get_modifiable_note(context, note_id, action="delete")
        await self.note_repo.soft_delete_note(note)
        logger.info("Note deleted", extra={"note_id": str(note.id), "tenant": context.tenant.slug})

    async def _get_active_note(self, context, note_id: str) -> Note:
        parsed_id = _parse_note_id(note_id)
        note = None
        if parsed_id is not None:
            note = await self.note_repo.get_active_note(context.tenant_id, parsed_id)
        if not note:
            raise NotFoundError("Note not found")
        return note

    async def _get_modifiable_note(self, context, note_id: str, action: str) -> Note:
        note = await self._get_active_note(context, note_id)
        if not can_modify_note(context.user, note):
            raise ForbiddenError(f"Not authorized to {action} this note")
        return note
