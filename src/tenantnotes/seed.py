"""
Demo data: the acme and globex tenants with an admin and a member each.

Run with `python -m tenantnotes.seed`. Existing tenants and users are left
as they are, so seeding twice is harmless.
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from .config import get_settings
from .core.logging import get_logger, setup_logging
from .core.models.tenant import Tenant, TenantPlan
from .core.models.user import User, UserRole
from .core.repositories.tenant_repository import TenantRepository
from .core.repositories.user_repository import UserRepository
from .database import create_engine, create_session_factory, create_tables
from .security import hash_password

logger = get_logger("seed")

DEMO_PASSWORD = "password"

DEMO_TENANTS = [
    {"name": "Acme Corporation", "slug": "acme"},
    {"name": "Globex Corporation", "slug": "globex"},
]

DEMO_USERS = [
    {"email": "admin@acme.test", "role": UserRole.ADMIN, "tenant": "acme"},
    {"email": "user@acme.test", "role": UserRole.MEMBER, "tenant": "acme"},
    {"email": "admin@globex.test", "role": UserRole.ADMIN, "tenant": "globex"},
    {"email": "user@globex.test", "role": UserRole.MEMBER, "tenant": "globex"},
]


async def seed_demo_data(session: AsyncSession) -> dict:
    """Insert whatever part of the demo data is missing. Returns what was created."""
    tenant_repo = TenantRepository(session)
    user_repo = UserRepository(session)
    created: dict[str, list[str]] = {"tenants": [], "users": []}

    tenants: dict[str, Tenant] = {}
    for data in DEMO_TENANTS:
        tenant = await tenant_repo.get_by_slug(data["slug"])
        if tenant is None:
            tenant = await tenant_repo.create_tenant({**data, "plan": TenantPlan.FREE})
            created["tenants"].append(tenant.slug)
        tenants[tenant.slug] = tenant

    password_hash = None
    for data in DEMO_USERS:
        if await user_repo.is_email_taken(data["email"]):
            continue
        # bcrypt is slow, hash once for all demo accounts
        password_hash = password_hash or hash_password(DEMO_PASSWORD)
        user: User = await user_repo.create_user(
            {
                "email": data["email"],
                "password_hash": password_hash,
                "role": data["role"],
                "tenant_id": tenants[data["tenant"]].id,
            }
        )
        created["users"].append(user.email)

    if created["tenants"] or created["users"]:
        logger.info("Demo data seeded", extra=created)
    else:
        logger.info("Demo data already present")
    return created


async def _main() -> None:
    settings = get_settings()
    setup_logging(settings)
    engine = create_engine(settings)
    try:
        await create_tables(engine)
        async with create_session_factory(engine)() as session:
            await seed_demo_data(session)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(_main())
