"""
Tax Use Case DTOs (Data Transfer Objects)

Command and Response classes for property and unit taxes.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Command DTOs
# ============================================================================


class TaxCommand(BaseModel):
    """Fields shared by property and unit tax records"""

    tax_year: int = Field(..., ge=1900, le=2200)
    tax_dec_no: str = Field(..., min_length=1, max_length=100)
    tax_amount: Decimal = Field(..., ge=0)
    due_date: datetime
    is_paid: bool = False
    is_annual: bool = True
    is_quarterly: bool = False
    what_quarter: Optional[str] = Field(None, max_length=20)
    processed_by: Optional[str] = Field(None, max_length=255)
    remarks: Optional[str] = Field(None, max_length=1000)


class PropertyTaxCommand(TaxCommand):
    property_id: UUID


class UnitTaxUpdateCommand(TaxCommand):
    marked_as_paid_by: Optional[str] = Field(None, max_length=255)


class UnitTaxCommand(UnitTaxUpdateCommand):
    unit_id: UUID


class TaxStatusCommand(BaseModel):
    is_paid: bool


# ============================================================================
# Response DTOs
# ============================================================================


class TaxResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tax_year: int
    tax_dec_no: str
    tax_amount: Decimal
    due_date: datetime
    is_paid: bool
    paid_date: Optional[datetime] = None
    is_annual: bool
    is_quarterly: bool
    what_quarter: Optional[str] = None
    processed_by: Optional[str] = None
    remarks: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PropertyTaxResponse(TaxResponse):
    property_id: UUID


class UnitTaxResponse(TaxResponse):
    unit_id: UUID
    marked_as_paid_by: Optional[str] = None
