"""
Note schemas.

Request bodies are trimmed and length-checked here; responses carry the
creator's id and email.
"""

import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.note import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from .common import CamelModel, PaginationInfo


class NoteWrite(BaseModel):
    """Note create/update request schema. Both fields are required."""

    title: str = Field(description="Note title")
    content: str = Field(description="Note content")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title and content are required")
        if len(v) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
        return v

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Title and content are required")
        if len(v) > CONTENT_MAX_LENGTH:
            raise ValueError(f"Content must be at most {CONTENT_MAX_LENGTH} characters")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Meeting Notes - Q4 Planning",
                "content": "Review Q3 performance, set Q4 objectives.",
            }
        }
    )


class NoteAuthor(CamelModel):
    id: uuid.UUID
    email: str


class NoteResponse(CamelModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str
    content: str
    tenant_id: uuid.UUID
    user: NoteAuthor = Field(description="User who created the note")
    created_at: datetime
    updated_at: datetime


class NoteEnvelope(CamelModel):
    note: NoteResponse


class NoteListResponse(CamelModel):
    """Paginated list of notes."""

    notes: List[NoteResponse]
    pagination: PaginationInfo
