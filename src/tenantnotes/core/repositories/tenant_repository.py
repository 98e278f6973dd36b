"""Tenant repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.tenant import Tenant, TenantPlan


class TenantRepository:
    """Repository for tenant database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_tenant(self, tenant_data: dict) -> Tenant:
        """Create new tenant."""
        tenant = Tenant(**tenant_data)
        self.session.add(tenant)
        await self.session.commit()
        await self.session.refresh(tenant)
        return tenant

    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID."""
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Tenant]:
        """Get tenant by slug."""
        stmt = select(Tenant).where(Tenant.slug == slug.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_plan(self, tenant: Tenant, plan: TenantPlan) -> Tenant:
        """Switch a tenant's plan; max_notes follows the plan."""
        tenant.plan = plan
        await self.session.commit()
        await self.session.refresh(tenant)
        return tenant
