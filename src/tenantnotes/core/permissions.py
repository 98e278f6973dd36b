"""
Role checks and the note ownership rule.

require_role guards whole endpoints (tenant administration). Whether a user
may change a particular note is decided by can_modify_note.
"""

from typing import Callable

from fastapi import Depends

from ..middleware.auth import TenantContext, get_tenant_context
from .exceptions import ForbiddenError, InsufficientPermissionsError
from .logging import get_logger
from .models.note import Note
from .models.user import User, UserRole

logger = get_logger("permissions")


def check_role(user: User, allowed_roles: tuple[UserRole, ...]) -> None:
    """Raise InsufficientPermissionsError unless user.role is allowed."""
    if user.role not in allowed_roles:
        raise InsufficientPermissionsError(
            required=[role.value for role in allowed_roles],
            current=UserRole(user.role).value,
        )


def require_role(*allowed_roles: UserRole) -> Callable:
    """Dependency factory: resolves the tenant context and checks the caller's role."""

    async def _dependency(context: TenantContext = Depends(get_tenant_context)) -> TenantContext:
        check_role(context.user, allowed_roles)
        return context

    return _dependency


require_admin = require_role(UserRole.ADMIN)


def check_own_tenant(context: TenantContext, slug: str, forbidden_message: str) -> None:
    """Raise ForbiddenError unless slug names the caller's tenant."""
    if slug != context.tenant.slug:
        logger.warning(
            "Tenant slug mismatch",
            extra={"requested": slug, "tenant": context.tenant.slug, "user_id": str(context.user_id)},
        )
        raise ForbiddenError(forbidden_message)


def require_tenant_admin(forbidden_message: str) -> Callable:
    """Dependency factory: an admin acting on the tenant named by the `slug` path parameter.

    FastAPI solves dependencies before it validates the request body, so a
    caller from another tenant is refused whatever the body holds.
    """

    async def _dependency(slug: str, context: TenantContext = Depends(require_admin)) -> TenantContext:
        check_own_tenant(context, slug, forbidden_message)
        return context

    return _dependency


def can_modify_note(user: User, note: Note) -> bool:
    """Creators may change their notes; admins may change any note of their tenant."""
    if note.tenant_id != user.tenant_id:
        return False
    return note.is_owned_by(user.id) or user.is_admin
