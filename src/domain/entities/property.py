"""
Property Entity

A building or lot under management, plus the movement log of its title.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utc_now
from .enums import PropertyType, TitleMovementStatus
from .user import User

if TYPE_CHECKING:
    from .document import Document
    from .tax import PropertyTax
    from .unit import Unit
    from .utility import PropertyUtility


class Property(SQLModel, table=True):
    """
    Property entity - root of the Property -> Unit -> Lease hierarchy.

    Business Rules:
    - total_units is maintained by unit create/delete, not derived
    - Deletion is physical and immediate
    """

    __tablename__ = "properties"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    property_code: str = Field(max_length=50, index=True)
    property_name: str = Field(max_length=255, index=True)
    title_no: str = Field(max_length=100)
    lot_no: str = Field(max_length=100)
    registered_owner: str = Field(max_length=255)
    leasable_area: float = Field(default=0)
    address: str = Field(max_length=500)
    property_type: PropertyType = Field(nullable=False)
    total_units: int = Field(default=0)

    created_by_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    created_by: Optional[User] = Relationship()
    units: list["Unit"] = Relationship(back_populates="property")
    property_taxes: list["PropertyTax"] = Relationship(back_populates="property")
    utilities: list["PropertyUtility"] = Relationship(back_populates="property")
    documents: list["Document"] = Relationship(back_populates="property")
    title_movements: list["PropertyTitleMovement"] = Relationship(back_populates="property")

    __table_args__ = (Index("idx_property_type", "property_type"),)


class PropertyTitleMovement(SQLModel, table=True):
    """
    PropertyTitleMovement entity - custody log of a property's title document.

    Business Rules:
    - Marking a movement RETURNED stamps return_date (defaults to now)
    """

    __tablename__ = "property_title_movements"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    property_id: UUID = Field(foreign_key="properties.id", nullable=False, index=True)
    requested_by: str = Field(max_length=255)
    status: TitleMovementStatus = Field(default=TitleMovementStatus.requested)
    location: str = Field(max_length=255)
    purpose: str = Field(max_length=500)
    remarks: Optional[str] = Field(default=None, max_length=1000)

    request_date: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    return_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    property: Optional[Property] = Relationship(back_populates="title_movements")
