"""
Property Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the property domain.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import PropertyType, TitleMovementStatus

from ..shared_dtos import DocumentSummary, UnitSummary, UtilitySummary


# ============================================================================
# Command DTOs
# ============================================================================


class PropertyCommand(BaseModel):
    """Create/update property payload"""

    property_name: str = Field(..., min_length=1, max_length=255)
    property_code: str = Field(..., min_length=1, max_length=50)
    title_no: str = Field(..., max_length=100)
    lot_no: str = Field(..., max_length=100)
    registered_owner: str = Field(..., max_length=255)
    leasable_area: float = Field(0, ge=0)
    address: str = Field(..., max_length=500)
    property_type: PropertyType
    total_units: int = Field(0, ge=0)


class TitleMovementCommand(BaseModel):
    """Create title movement payload"""

    requested_by: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    purpose: str = Field(..., min_length=1)
    remarks: Optional[str] = None
    status: TitleMovementStatus = TitleMovementStatus.requested


class TitleMovementStatusCommand(BaseModel):
    status: TitleMovementStatus
    remarks: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class PropertyResponse(BaseModel):
    """A property without relations"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    property_code: str
    property_name: str
    title_no: str
    lot_no: str
    registered_owner: str
    leasable_area: float
    address: str
    property_type: PropertyType
    total_units: int
    created_by_id: UUID
    created_at: datetime
    updated_at: datetime


class PropertyTaxSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tax_year: int
    tax_dec_no: str
    tax_amount: Decimal
    due_date: datetime
    is_paid: bool
    paid_date: Optional[datetime] = None


class TitleMovementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    property_id: UUID
    requested_by: str
    status: TitleMovementStatus
    location: str
    purpose: str
    remarks: Optional[str] = None
    request_date: datetime
    return_date: Optional[datetime] = None


class PropertyDetailResponse(PropertyResponse):
    """A property with units, documents, utilities, taxes and title movements"""

    units: List[UnitSummary]
    documents: List[DocumentSummary]
    utilities: List[UtilitySummary]
    property_taxes: List[PropertyTaxSummary]
    title_movements: List[TitleMovementResponse]


class PropertyExportResponse(PropertyResponse):
    units: List[UnitSummary]
    documents: List[DocumentSummary]
    utilities: List[UtilitySummary]
