"""
Service layer: business rules between the API routers and the repositories.
"""

from .auth_service import AuthService
from .health_service import HealthService
from .note_service import NoteService
from .quota_service import QuotaService
from .tenant_service import TenantService

__all__ = [
    "AuthService",
    "NoteService",
    "QuotaService",
    "TenantService",
    "HealthService",
]
