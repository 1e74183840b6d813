"""
Unit Entity

A leasable space inside a property.
"""

from decimal import Decimal
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utc_now
from .enums import UnitStatus

if TYPE_CHECKING:
    from .document import Document
    from .lease import Lease
    from .maintenance_request import MaintenanceRequest
    from .property import Property
    from .tax import UnitTax
    from .utility import UnitUtilityAccount


class Unit(SQLModel, table=True):
    """
    Unit entity - a space within a property (UI calls these "spaces").

    Business Rules:
    - status is mutated directly by lease actions, no state machine guard
    - unit_area contributes to area-based occupancy when status is OCCUPIED
    """

    __tablename__ = "units"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    property_id: UUID = Field(foreign_key="properties.id", nullable=False, index=True)
    unit_number: str = Field(max_length=50, index=True)
    unit_area: float = Field(default=0)
    unit_rate: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    rent_amount: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    status: UnitStatus = Field(default=UnitStatus.vacant)

    # Floor flags
    is_first_floor: bool = Field(default=False)
    is_second_floor: bool = Field(default=False)
    is_third_floor: bool = Field(default=False)
    is_roof_top: bool = Field(default=False)
    is_mezzanine: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    property: Optional["Property"] = Relationship(back_populates="units")
    leases: list["Lease"] = Relationship(back_populates="unit")
    unit_taxes: list["UnitTax"] = Relationship(back_populates="unit")
    utility_accounts: list["UnitUtilityAccount"] = Relationship(back_populates="unit")
    maintenance_requests: list["MaintenanceRequest"] = Relationship(back_populates="unit")
    documents: list["Document"] = Relationship(back_populates="unit")

    __table_args__ = (Index("idx_unit_status", "status"),)
