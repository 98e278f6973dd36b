"""
User model for authentication.
"""

import enum
import uuid

from sqlalchemy import Boolean, Enum as SAEnum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from .base import BaseModel
from .types import GUID


class UserRole(str, enum.Enum):
    """Closed set of roles inside a tenant."""

    ADMIN = "admin"
    MEMBER = "member"


class User(BaseModel):
    """User account, always owned by exactly one tenant."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[UserRole] = mapped_column(
        SAEnum(
            UserRole,
            name="user_role",
            native_enum=False,
            length=20,
            values_callable=lambda e: [member.value for member in e],
        ),
        default=UserRole.MEMBER,
        nullable=False,
    )

    tenant_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    __table_args__ = (
        Index("idx_users_email", "email"),
        Index("idx_users_tenant_active", "tenant_id", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}', role='{self.role}')>"

    @validates("email")
    def _normalize_email(self, key, value: str) -> str:
        return value.strip().lower()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
