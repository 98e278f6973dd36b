"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, LoginResponse, MeResponse, TenantSummary, UserSummary
from .common import (
    ErrorResponse,
    HealthCheckResponse,
    LivenessResponse,
    MessageResponse,
    PaginationInfo,
)
from .notes import NoteEnvelope, NoteListResponse, NoteResponse, NoteWrite
from .tenants import (
    InviteRequest,
    InviteResponse,
    TenantStats,
    TenantStatsResponse,
    UpgradeResponse,
)

__all__ = [
    # Auth schemas
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "TenantSummary",
    "UserSummary",
    # Note schemas
    "NoteWrite",
    "NoteResponse",
    "NoteEnvelope",
    "NoteListResponse",
    # Tenant schemas
    "UpgradeResponse",
    "TenantStats",
    "TenantStatsResponse",
    "InviteRequest",
    "InviteResponse",
    # Common schemas
    "PaginationInfo",
    "MessageResponse",
    "ErrorResponse",
    "LivenessResponse",
    "HealthCheckResponse",
]
