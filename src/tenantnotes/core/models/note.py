# Note model for tenant content
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 10000


class Note(BaseModel):
    """Short text note. Deleting a note only clears is_active."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # creator
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    tenant_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # loaded with every note query so responses can carry the creator's email
    user: Mapped["User"] = relationship("User", lazy="selectin")

    __table_args__ = (
        Index("idx_notes_tenant_user", "tenant_id", "user_id"),
        Index("idx_notes_tenant_created", "tenant_id", "created_at"),
        CheckConstraint(f"length(title) <= {TITLE_MAX_LENGTH}", name="ck_notes_title_len"),
        CheckConstraint(f"length(content) <= {CONTENT_MAX_LENGTH}", name="ck_notes_content_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', tenant_id={self.tenant_id})>"

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        """True when user_id created this note."""
        return self.user_id == user_id
