"""
Shared DTOs

Summaries embedded in more than one area's responses, and the bulk
command/response pair used by every bulk delete.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import (
    DocumentType,
    LeaseStatus,
    PaymentMethod,
    PaymentStatus,
    PaymentType,
    UnitStatus,
    UserRole,
    UtilityType,
)


# ============================================================================
# Command DTOs
# ============================================================================


class BulkDeleteCommand(BaseModel):
    """IDs to delete together in one transaction"""

    ids: List[UUID] = Field(..., min_length=1)


# ============================================================================
# Response DTOs
# ============================================================================


class BulkDeleteResponse(BaseModel):
    deleted: int


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    first_name: str
    last_name: str
    role: UserRole
    image: Optional[str] = None


class PropertyRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    property_name: str
    property_code: str


class UnitRef(BaseModel):
    """A unit with its property, as embedded in lease and request listings"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    unit_number: str
    property: Optional[PropertyRef] = None


class UnitSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    property_id: UUID
    unit_number: str
    unit_area: float
    rent_amount: Decimal
    status: UnitStatus


class DocumentSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    document_type: DocumentType
    file_url: str
    created_at: datetime


class UtilitySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    property_id: UUID
    utility_type: UtilityType
    provider: str
    account_number: str
    meter_number: Optional[str] = None
    is_active: bool


class PaymentSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    lease_id: UUID
    amount: Decimal
    payment_type: PaymentType
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    payment_date: datetime


class LeaseSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tenant_id: UUID
    unit_id: UUID
    start_date: datetime
    end_date: datetime
    rent_amount: Decimal
    security_deposit: Decimal
    status: LeaseStatus
    termination_date: Optional[datetime] = None
    termination_reason: Optional[str] = None
