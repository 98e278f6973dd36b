"""User repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import User


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Create new user."""
        user = User(**user_data)
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str, active_only: bool = False) -> Optional[User]:
        """Get user by email, across all tenants (emails are globally unique)."""
        stmt = select(User).where(User.email == email.strip().lower())
        if active_only:
            stmt = stmt.where(User.is_active.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_email_taken(self, email: str) -> bool:
        """Check if any account, in any tenant, uses this email."""
        user = await self.get_by_email(email)
        return user is not None

    async def count_active_users(self, tenant_id: UUID) -> int:
        """Count active users of a tenant."""
        stmt = select(func.count(User.id)).where(
            User.tenant_id == tenant_id, User.is_active.is_(True)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
