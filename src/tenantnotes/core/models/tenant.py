"""
Tenant model - the isolation boundary for users and notes.
"""

import enum

from sqlalchemy import Boolean, Enum as SAEnum, Index, Integer, String, event
from sqlalchemy.orm import Mapped, mapped_column, validates

from .base import BaseModel

# maxNotes sentinel for plans without a quota
UNLIMITED_NOTES = -1


class TenantPlan(str, enum.Enum):
    """Subscription tier."""

    FREE = "free"
    PRO = "pro"


PLAN_NOTE_LIMITS = {
    TenantPlan.FREE: 3,
    TenantPlan.PRO: UNLIMITED_NOTES,
}


def max_notes_for_plan(plan) -> int:
    """Note quota derived from a plan."""
    return PLAN_NOTE_LIMITS[TenantPlan(plan)]


class Tenant(BaseModel):
    """Organization account. All users and notes hang off a tenant."""

    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    plan: Mapped[TenantPlan] = mapped_column(
        SAEnum(
            TenantPlan,
            name="tenant_plan",
            native_enum=False,
            length=20,
            values_callable=lambda e: [member.value for member in e],
        ),
        default=TenantPlan.FREE,
        nullable=False,
    )
    # always derived from plan, see _sync_max_notes
    max_notes: Mapped[int] = mapped_column(
        Integer, default=PLAN_NOTE_LIMITS[TenantPlan.FREE], nullable=False
    )

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    __table_args__ = (Index("idx_tenants_slug", "slug"),)

    def __repr__(self) -> str:
        return f"<Tenant(slug='{self.slug}', plan='{self.plan}')>"

    @validates("slug")
    def _normalize_slug(self, key, value: str) -> str:
        return value.strip().lower()

    @property
    def is_unlimited(self) -> bool:
        return self.max_notes == UNLIMITED_NOTES


@event.listens_for(Tenant.plan, "set", propagate=True)
def _sync_max_notes(target, value, oldvalue, initiator):
    target.max_notes = max_notes_for_plan(value)


@event.listens_for(Tenant, "init", propagate=True)
def _init_tenant_plan(target, args, kwargs):
    if "plan" not in kwargs:
        target.plan = TenantPlan.FREE
