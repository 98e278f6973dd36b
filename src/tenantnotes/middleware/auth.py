"""Authentication dependencies: bearer token -> user -> tenant context."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.exceptions import InactiveAccountError, InactiveTenantError, MissingCredentialsError
from ..core.logging import get_logger
from ..core.models.tenant import Tenant
from ..core.models.user import User
from ..core.repositories.tenant_repository import TenantRepository
from ..core.repositories.user_repository import UserRepository
from ..database import get_db_session
from ..security import get_user_id_from_token

logger = get_logger("auth")


@dataclass(frozen=True)
class TenantContext:
    """Authenticated user and the tenant every data access is scoped to."""

    user: User
    tenant: Tenant

    @property
    def tenant_id(self) -> UUID:
        return self.tenant.id

    @property
    def user_id(self) -> UUID:
        return self.user.id


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication."""

    def __init__(self):
        # we raise our own 401 instead of HTTPBearer's default error
        super().__init__(auto_error=False)

    async def __call__(
        self, request: Request, settings: Settings = Depends(get_settings)
    ) -> UUID:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or not credentials.credentials:
            raise MissingCredentialsError()

        return get_user_id_from_token(credentials.credentials, settings)


# Dependency for getting current user ID from JWT
get_current_user_id = JWTBearer()


async def resolve_tenant_context(session: AsyncSession, user_id: UUID) -> TenantContext:
    """Load the user, then their tenant; either being inactive fails authentication."""
    user = await UserRepository(session).get_by_id(user_id)
    if not user or not user.is_active:
        logger.warning("Rejected token for missing or inactive user", extra={"user_id": str(user_id)})
        raise InactiveAccountError()

    tenant = await TenantRepository(session).get_by_id(user.tenant_id)
    if not tenant or not tenant.is_active:
        logger.warning(
            "Rejected token for inactive tenant",
            extra={"user_id": str(user_id), "tenant_id": str(user.tenant_id)},
        )
        raise InactiveTenantError()

    return TenantContext(user=user, tenant=tenant)


async def get_tenant_context(
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
) -> TenantContext:
    """Resolve the request's TenantContext and expose it on request.state."""
    context = await resolve_tenant_context(session, user_id)
    request.state.user = context.user
    request.state.tenant = context.tenant
    return context
