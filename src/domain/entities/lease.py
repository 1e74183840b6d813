"""
Lease and Payment Entities

A lease binds one tenant to one unit; payments settle it.
"""

from decimal import Decimal
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utc_now
from .enums import LeaseStatus, PaymentMethod, PaymentStatus, PaymentType

if TYPE_CHECKING:
    from .tenant import Tenant
    from .unit import Unit


class Lease(SQLModel, table=True):
    """
    Lease entity - Unit 1-N Lease N-1 Tenant.

    Business Rules:
    - An ACTIVE lease marks its unit OCCUPIED; terminate/delete marks it VACANT
    - Nothing prevents overlapping leases on one unit
    """

    __tablename__ = "leases"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    unit_id: UUID = Field(foreign_key="units.id", nullable=False, index=True)

    start_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    rent_amount: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    security_deposit: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    status: LeaseStatus = Field(default=LeaseStatus.pending)

    termination_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    termination_reason: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    tenant: Optional["Tenant"] = Relationship(back_populates="leases")
    unit: Optional["Unit"] = Relationship(back_populates="leases")
    payments: list["Payment"] = Relationship(back_populates="lease")

    __table_args__ = (
        Index("idx_lease_status", "status"),
        Index("idx_lease_end_date", "end_date"),
    )


class Payment(SQLModel, table=True):
    """
    Payment entity - money received against a lease.

    Business Rules:
    - Only COMPLETED payments count as revenue in reports
    """

    __tablename__ = "payments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    lease_id: UUID = Field(foreign_key="leases.id", nullable=False, index=True)
    amount: Decimal = Field(max_digits=14, decimal_places=2)
    payment_type: PaymentType = Field(default=PaymentType.rent)
    payment_method: PaymentMethod = Field(default=PaymentMethod.cash)
    payment_status: PaymentStatus = Field(default=PaymentStatus.pending)
    payment_date: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    lease: Optional[Lease] = Relationship(back_populates="payments")

    __table_args__ = (Index("idx_payment_status_date", "payment_status", "payment_date"),)
