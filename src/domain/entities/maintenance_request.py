"""
MaintenanceRequest Entity

Repair or service request raised against a unit.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utc_now
from .enums import MaintenanceCategory, MaintenancePriority, MaintenanceStatus
from .user import User

if TYPE_CHECKING:
    from .tenant import Tenant
    from .unit import Unit


class MaintenanceRequest(SQLModel, table=True):
    """
    MaintenanceRequest entity.

    Business Rules:
    - Moving to COMPLETED stamps completed_at
    - Maintenance expenses in reports are not derived from requests (always 0)
    """

    __tablename__ = "maintenance_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    unit_id: UUID = Field(foreign_key="units.id", nullable=False, index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)
    category: MaintenanceCategory = Field(default=MaintenanceCategory.other)
    priority: MaintenancePriority = Field(default=MaintenancePriority.medium)
    description: str = Field(max_length=2000)
    status: MaintenanceStatus = Field(default=MaintenanceStatus.pending)
    assigned_to_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Relationships
    unit: Optional["Unit"] = Relationship(back_populates="maintenance_requests")
    tenant: Optional["Tenant"] = Relationship(back_populates="maintenance_requests")
    assigned_to: Optional[User] = Relationship()

    __table_args__ = (Index("idx_maintenance_status", "status"),)
