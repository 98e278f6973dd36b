"""Notes API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.notes import NoteEnvelope, NoteListResponse, NoteWrite
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import TenantContext, get_tenant_context

# keeps the list offset inside a 64-bit integer
MAX_PAGE = 1_000_000

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@router.get("", response_model=NoteListResponse)
async def list_notes(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, max_length=200),
    context: TenantContext = Depends(get_tenant_context),
    session: AsyncSession = Depends(get_db_session),
):
    """List the tenant's notes, optionally filtered by a search term."""
    note_service = NoteService(session)
    return await note_service.list_notes(context, page=page, limit=limit, search=search)


@router.post("", response_model=NoteEnvelope, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteWrite,
    context: TenantContext = Depends(get_tenant_context),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(context, request)


@router.get("/{note_id}", response_model=NoteEnvelope)
async def get_note(
    note_id: str,
    context: TenantContext = Depends(get_tenant_context),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(context, note_id)


@router.put("/{note_id}", response_model=NoteEnvelope)
async def update_note(
    note_id: str,
    request: NoteWrite,
    context: TenantContext = Depends(get_tenant_context),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note."""
    note_service = NoteService(session)
    return await note_service.update_note(context, note_id, request)


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(
    note_id: str,
    context: TenantContext = Depends(get_tenant_context),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note. The row is kept and marked inactive."""
    note_service = NoteService(session)
    await note_service.delete_note(context, note_id)
    return MessageResponse(message="Note deleted successfully")
