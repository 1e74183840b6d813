"""
Utility Entities

Utility service accounts at property and unit level, and their bills.
"""

from decimal import Decimal
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from ..base import utc_now
from .enums import UtilityType

if TYPE_CHECKING:
    from .property import Property
    from .unit import Unit


class PropertyUtility(SQLModel, table=True):
    """
    PropertyUtility entity - a utility service contracted for a property.

    Business Rules:
    - Bills of a property utility count as expenses in the financial report
    """

    __tablename__ = "property_utilities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    property_id: UUID = Field(foreign_key="properties.id", nullable=False, index=True)
    utility_type: UtilityType = Field(nullable=False)
    provider: str = Field(max_length=255)
    account_number: str = Field(max_length=100)
    meter_number: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    property: Optional["Property"] = Relationship(back_populates="utilities")
    bills: list["UtilityBill"] = Relationship(back_populates="property_utility")


class UnitUtilityAccount(SQLModel, table=True):
    """UnitUtilityAccount entity - sub-metered utility account of a unit."""

    __tablename__ = "unit_utility_accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    unit_id: UUID = Field(foreign_key="units.id", nullable=False, index=True)
    utility_type: UtilityType = Field(nullable=False)
    account_number: str = Field(max_length=100)
    meter_number: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    unit: Optional["Unit"] = Relationship(back_populates="utility_accounts")
    bills: list["UtilityBill"] = Relationship(back_populates="unit_utility_account")


class UtilityBill(SQLModel, table=True):
    """
    UtilityBill entity - one billing period of a property or unit utility.

    Business Rules:
    - Exactly one of property_utility_id / unit_utility_account_id is expected
    """

    __tablename__ = "utility_bills"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    property_utility_id: Optional[UUID] = Field(
        default=None, foreign_key="property_utilities.id", index=True
    )
    unit_utility_account_id: Optional[UUID] = Field(
        default=None, foreign_key="unit_utility_accounts.id", index=True
    )
    billing_period_start: datetime = Field(sa_column=Column(DateTime, nullable=False))
    billing_period_end: datetime = Field(sa_column=Column(DateTime, nullable=False))
    amount: Decimal = Field(max_digits=14, decimal_places=2)
    consumption: Optional[float] = Field(default=None)
    is_paid: bool = Field(default=False)
    paid_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    property_utility: Optional[PropertyUtility] = Relationship(back_populates="bills")
    unit_utility_account: Optional[UnitUtilityAccount] = Relationship(back_populates="bills")
