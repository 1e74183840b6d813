"""
Tenant Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the tenant domain.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.entities import (
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
    TenantStatus,
)

from ..shared_dtos import DocumentSummary, LeaseSummary, PaymentSummary, UnitRef


# ============================================================================
# Command DTOs
# ============================================================================


class TenantCommand(BaseModel):
    """Create/update tenant payload"""

    bp_code: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    company: str = Field(..., min_length=1, max_length=255)
    status: TenantStatus = TenantStatus.active
    emergency_contact_name: Optional[str] = Field(None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(None, max_length=50)


# ============================================================================
# Response DTOs
# ============================================================================


class TenantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    bp_code: str
    first_name: str
    last_name: str
    email: str
    phone: str
    company: str
    status: TenantStatus
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    created_at: datetime


class TenantLease(LeaseSummary):
    """A tenant's lease with its unit, property and payments"""

    unit: Optional[UnitRef] = None
    payments: List[PaymentSummary]


class TenantMaintenanceRequest(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    category: MaintenanceCategory
    priority: MaintenancePriority
    description: str
    status: MaintenanceStatus
    created_at: datetime
    completed_at: Optional[datetime] = None
    unit: Optional[UnitRef] = None


class TenantDetailResponse(TenantResponse):
    leases: List[TenantLease]
    maintenance_requests: List[TenantMaintenanceRequest]
    documents: List[DocumentSummary]
