"""
Tenant Entity

A lessee (person or company) renting one or more units.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utc_now
from .enums import TenantStatus

if TYPE_CHECKING:
    from .document import Document
    from .lease import Lease
    from .maintenance_request import MaintenanceRequest


class Tenant(SQLModel, table=True):
    """
    Tenant entity - lessee of units through leases.

    Business Rules:
    - bp_code is the external business-partner code
    - CSV import requires status to match TenantStatus case-insensitively
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    bp_code: str = Field(max_length=50, index=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: str = Field(max_length=255, index=True)
    phone: str = Field(max_length=50)
    company: str = Field(max_length=255)
    status: TenantStatus = Field(default=TenantStatus.active)
    emergency_contact_name: Optional[str] = Field(default=None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(default=None, max_length=50)

    created_by_id: UUID = Field(foreign_key="users.id", nullable=False)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    leases: list["Lease"] = Relationship(back_populates="tenant")
    maintenance_requests: list["MaintenanceRequest"] = Relationship(back_populates="tenant")
    documents: list["Document"] = Relationship(back_populates="tenant")

    __table_args__ = (Index("idx_tenant_status", "status"),)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
