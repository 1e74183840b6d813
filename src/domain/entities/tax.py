"""
Tax Entities

Real-property tax declarations for a whole property or for a single unit.
"""

from decimal import Decimal
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utc_now

if TYPE_CHECKING:
    from .property import Property
    from .unit import Unit


class PropertyTax(SQLModel, table=True):
    """
    PropertyTax entity - yearly or quarterly tax due on a property.

    Business Rules:
    - Setting is_paid stamps paid_date; clearing it clears paid_date
    - Taxes count as expenses in the financial report
    """

    __tablename__ = "property_taxes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    property_id: UUID = Field(foreign_key="properties.id", nullable=False, index=True)
    tax_year: int = Field(nullable=False)
    tax_dec_no: str = Field(max_length=100)
    tax_amount: Decimal = Field(max_digits=14, decimal_places=2)
    due_date: datetime = Field(sa_column=Column(DateTime, nullable=False))

    is_paid: bool = Field(default=False)
    paid_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    is_annual: bool = Field(default=True)
    is_quarterly: bool = Field(default=False)
    what_quarter: Optional[str] = Field(default=None, max_length=20)
    processed_by: Optional[str] = Field(default=None, max_length=255)
    remarks: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    property: Optional["Property"] = Relationship(back_populates="property_taxes")

    __table_args__ = (Index("idx_property_tax_year", "property_id", "tax_year"),)


class UnitTax(SQLModel, table=True):
    """
    UnitTax entity - tax due on a single unit.

    Business Rules:
    - marked_as_paid_by records who flipped is_paid
    """

    __tablename__ = "unit_taxes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    unit_id: UUID = Field(foreign_key="units.id", nullable=False, index=True)
    tax_year: int = Field(nullable=False)
    tax_dec_no: str = Field(max_length=100)
    tax_amount: Decimal = Field(max_digits=14, decimal_places=2)
    due_date: datetime = Field(sa_column=Column(DateTime, nullable=False))

    is_paid: bool = Field(default=False)
    paid_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    is_annual: bool = Field(default=True)
    is_quarterly: bool = Field(default=False)
    what_quarter: Optional[str] = Field(default=None, max_length=20)
    processed_by: Optional[str] = Field(default=None, max_length=255)
    marked_as_paid_by: Optional[str] = Field(default=None, max_length=255)
    remarks: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    unit: Optional["Unit"] = Relationship(back_populates="unit_taxes")
