"""
Tenant administration schemas: upgrade, stats and invite.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.user import UserRole
from .auth import TenantSummary
from .common import CamelModel


class UpgradeResponse(CamelModel):
    message: str
    tenant: TenantSummary


class TenantStats(CamelModel):
    users: int
    notes: int
    notes_remaining: Union[int, Literal["unlimited"]]


class TenantStatsResponse(CamelModel):
    tenant: TenantSummary
    stats: TenantStats


class InviteRequest(BaseModel):
    """Invitation request. Email presence is checked by the service, after the slug check."""

    email: Optional[str] = Field(default=None, max_length=320)
    role: UserRole = Field(default=UserRole.MEMBER)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip().lower() or None

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "new.hire@acme.test", "role": "member"}}
    )


class InviteResponse(CamelModel):
    message: str
    email: str
    role: UserRole
    tenant: str
    note: str
