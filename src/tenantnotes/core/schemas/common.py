"""
Shared response schemas - camelCase base, pagination, errors etc
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for response bodies: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationInfo(CamelModel):
    """Page metadata for list responses"""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def create(cls, page: int, limit: int, total: int) -> "PaginationInfo":
        # ceil(total / limit)
        pages = (total + limit - 1) // limit
        return cls(page=page, limit=limit, total=total, pages=pages)


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(description="Short error description")
    code: Optional[str] = Field(default=None, description="Stable machine-readable error code")
    message: Optional[str] = Field(default=None, description="Human-readable detail")

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "error": "Note limit reached",
                "code": "quota_exceeded",
                "message": "Free plan is limited to 3 notes. Upgrade to Pro for unlimited notes.",
                "limit": 3,
                "current": 3,
            }
        },
    )


class LivenessResponse(BaseModel):
    status: str = "ok"


class HealthCheckResponse(BaseModel):
    """Readiness check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")
