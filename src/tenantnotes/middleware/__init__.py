"""Request authentication and tenant resolution."""

from .auth import JWTBearer, TenantContext, get_current_user_id, get_tenant_context

__all__ = ["JWTBearer", "TenantContext", "get_current_user_id", "get_tenant_context"]
