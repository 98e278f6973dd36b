"""
Database models for TenantNotes.

Models included:
    - Tenant: organization account with plan and note quota
    - User: tenant member with email/password login and a role
    - Note: tenant-scoped text note with soft delete
"""

from .base import BaseModel
from .note import Note
from .tenant import UNLIMITED_NOTES, Tenant, TenantPlan, max_notes_for_plan
from .user import User, UserRole

__all__ = [
    "BaseModel",
    "Tenant",
    "TenantPlan",
    "UNLIMITED_NOTES",
    "max_notes_for_plan",
    "User",
    "UserRole",
    "Note",
]
