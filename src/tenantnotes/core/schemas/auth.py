"""
Authentication schemas.

Login request plus the user/tenant summaries returned by login and /me.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.tenant import TenantPlan
from ..models.user import UserRole
from .common import CamelModel


class LoginRequest(BaseModel):
    """User login request schema."""

    email: str = Field(min_length=1, max_length=320, description="Account email")
    password: str = Field(min_length=1, description="User password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("Email and password are required")
        return v

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "admin@acme.test", "password": "password"}}
    )


class TenantSummary(CamelModel):
    """Tenant fields exposed to its users."""

    id: uuid.UUID
    name: str
    slug: str
    plan: TenantPlan
    max_notes: int


class UserSummary(CamelModel):
    """Current user with their tenant."""

    id: uuid.UUID
    email: str
    role: UserRole
    tenant: TenantSummary


class LoginResponse(CamelModel):
    """Bearer token plus the authenticated user."""

    token: str
    user: UserSummary

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "email": "admin@acme.test",
                    "role": "admin",
                    "tenant": {
                        "id": "0b8e3c1a-6a57-4a47-9d8f-1f3a1b5c2d7e",
                        "name": "Acme Corporation",
                        "slug": "acme",
                        "plan": "free",
                        "maxNotes": 3,
                    },
                },
            }
        }
    )


class MeResponse(CamelModel):
    user: UserSummary
