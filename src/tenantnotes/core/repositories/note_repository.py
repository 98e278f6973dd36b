"""Note repository for database operations.

Every query takes the caller's tenant_id and filters on it.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _active_notes(self, tenant_id: UUID):
        return select(Note).where(Note.tenant_id == tenant_id, Note.is_active.is_(True))

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        return note

    async def get_active_note(self, tenant_id: UUID, note_id: UUID) -> Optional[Note]:
        """Get an active note of the tenant by ID."""
        stmt = self._active_notes(tenant_id).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply changes to a loaded note and persist them."""
        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        return note

    async def soft_delete_note(self, note: Note) -> None:
        """Mark a note inactive; the row is kept."""
        note.is_active = False
        await self.session.commit()

    async def count_active_notes(self, tenant_id: UUID) -> int:
        """Count active notes of a tenant."""
        stmt = select(func.count(Note.id)).where(
            Note.tenant_id == tenant_id, Note.is_active.is_(True)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def list_tenant_notes(
        self,
        tenant_id: UUID,
        page: int = 1,
        per_page: int = 10,
        search: Optional[str] = None,
    ) -> tuple[List[Note], int]:
        """List active tenant notes, newest first, with optional text search."""
        offset = (page - 1) * per_page

        conditions = [Note.tenant_id == tenant_id, Note.is_active.is_(True)]
        if search:
            pattern = f"%{_escape_like(search)}%"
            conditions.append(
                or_(
                    Note.title.ilike(pattern, escape="\\"),
                    Note.content.ilike(pattern, escape="\\"),
                )
            )

        count_stmt = select(func.count(Note.id)).where(*conditions)
        total_result = await self.session.execute(count_stmt)
        total_count = total_result.scalar() or 0

        stmt = (
            select(Note)
            .where(*conditions)
            .order_by(desc(Note.created_at), desc(Note.id))
            .offset(offset)
            .limit(per_page)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total_count
